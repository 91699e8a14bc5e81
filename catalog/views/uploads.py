"""Image upload routes under /api/uploads."""

from rest_framework import status

from catalog.exceptions import InvalidArgumentError
from catalog.schemas.upload import DeleteFileRequest, UploadFormRequest
from catalog.services.upload_service import upload_service
from catalog.views.base import ADMIN, SIGNED_IN, CatalogAPIView


class UploadAPIView(CatalogAPIView):
    """Base for multipart upload routes."""

    def form(self, request) -> UploadFormRequest:
        """Validate the non-file form fields sent with the upload."""
        fields = {
            key: value
            for key, value in request.data.items()
            if key not in request.FILES
        }
        return self.validate(UploadFormRequest, fields)

    def created(self, result, message: str):
        return self.success(
            result, status_code=status.HTTP_201_CREATED, message=message
        )


class SingleUploadView(UploadAPIView):
    """Upload one image in the ``file`` field."""

    method_permissions = {"POST": SIGNED_IN}

    def post(self, request):
        """Store an image under ``folder`` with an optional filename ``prefix``.

        Returns:
            201 Created with the stored file's URL
            400 Bad Request for a missing, non-image or oversized file
            401 Unauthorized without a valid token
        """
        form = self.form(request)
        result = upload_service.upload_file(
            request.FILES.get("file"),
            self.user_id(),
            folder=form.folder,
            prefix=form.prefix,
        )
        return self.created(result, "File uploaded successfully")


class MultipleUploadView(UploadAPIView):
    """Upload up to five images in the ``files`` field."""

    method_permissions = {"POST": SIGNED_IN}

    def post(self, request):
        """Store every file or none of them."""
        form = self.form(request)
        result = upload_service.upload_files(
            request.FILES.getlist("files"),
            self.user_id(),
            folder=form.folder,
            prefix=form.prefix,
        )
        return self.created(result, "Files uploaded successfully")


class LogoUploadView(UploadAPIView):
    method_permissions = {"POST": SIGNED_IN}

    def post(self, request):
        """Store an app logo; ``appId`` names the app when it already exists."""
        form = self.form(request)
        file = request.FILES.get("file")
        if file is None:
            raise InvalidArgumentError("No logo file provided")
        result = upload_service.upload_app_logo(file, form.app_id, self.user_id())
        return self.created(result, "Logo uploaded successfully")


class ScreenshotsUploadView(UploadAPIView):
    method_permissions = {"POST": SIGNED_IN}

    def post(self, request):
        """Store app screenshots sent in the ``files`` field."""
        form = self.form(request)
        files = request.FILES.getlist("files")
        if not files:
            raise InvalidArgumentError("No screenshot files provided")
        result = upload_service.upload_app_screenshots(
            files, form.app_id, self.user_id()
        )
        return self.created(result, "Screenshots uploaded successfully")


class SlideImageUploadView(UploadAPIView):
    method_permissions = {"POST": ADMIN}

    def post(self, request):
        """Store a hero slide image; admins only."""
        form = self.form(request)
        file = request.FILES.get("file")
        if file is None:
            raise InvalidArgumentError("No image file provided")
        result = upload_service.upload_slide_image(file, form.slide_id, self.user_id())
        return self.created(result, "Slide image uploaded successfully")


class UploadDeleteView(CatalogAPIView):
    """Delete a stored file by its public URL."""

    method_permissions = {"DELETE": SIGNED_IN}

    def delete(self, request):
        """Body: ``{"fileUrl": "<public URL>"}``.

        Returns:
            200 OK once the object and its records are removed
            400 Bad Request if the URL is not a storage URL
            403 Forbidden if someone else uploaded the file
            404 Not Found if no object exists at that URL
        """
        delete_request = self.validate(DeleteFileRequest, request.data)
        upload_service.delete_file(delete_request.file_url, request.user)
        return self.success(message="File deleted successfully")


class UploadStatsView(CatalogAPIView):
    """The caller's upload totals."""

    method_permissions = {"GET": SIGNED_IN}

    def get(self, request):
        return self.success(upload_service.get_upload_stats(self.user_id()))
