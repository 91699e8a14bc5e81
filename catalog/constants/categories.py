"""Static catalog of app categories."""

CATEGORIES: list[dict[str, str]] = [
    {"id": "games", "name": "Games", "icon": "🎮", "color": "#ef4444"},
    {"id": "productivity", "name": "Productivity", "icon": "📊", "color": "#3b82f6"},
    {"id": "social", "name": "Social", "icon": "💬", "color": "#8b5cf6"},
    {"id": "entertainment", "name": "Entertainment", "icon": "🎬", "color": "#f59e0b"},
    {"id": "education", "name": "Education", "icon": "📚", "color": "#10b981"},
    {"id": "finance", "name": "Finance", "icon": "💰", "color": "#059669"},
    {"id": "health", "name": "Health & Fitness", "icon": "💪", "color": "#ec4899"},
    {"id": "lifestyle", "name": "Lifestyle", "icon": "✨", "color": "#6366f1"},
    {"id": "shopping", "name": "Shopping", "icon": "🛍️", "color": "#f97316"},
    {"id": "tools", "name": "Tools", "icon": "🛠️", "color": "#6b7280"},
    {"id": "other", "name": "Other", "icon": "📦", "color": "#9ca3af"},
]

CATEGORIES_BY_ID: dict[str, dict[str, str]] = {c["id"]: c for c in CATEGORIES}
