"""Upload limits and storage folders."""

ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")
MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB
MAX_FILES_PER_REQUEST = 5

DEFAULT_UPLOAD_FOLDER = "uploads"
LOGO_FOLDER = "apps/logos"
SCREENSHOT_FOLDER = "apps/screenshots"
SLIDE_FOLDER = "slides"
