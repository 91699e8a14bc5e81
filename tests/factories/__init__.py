"""Test data builders backed by Faker.

Each ``create_*`` helper saves a model instance with realistic defaults;
keyword arguments override any field.
"""

from faker import Faker

from catalog.enums import AppCategory, AppStatus
from catalog.models import App, HeroSlide, Rating, User
from catalog.services.naming import generate_slug

fake = Faker()

# Neutral text so search tests control every match
LISTING_DESCRIPTION = (
    "A handy tool for everyday use with plenty of thoughtful features built in."
)


def app_payload(**overrides) -> dict:
    """A valid POST /api/apps body in wire format."""
    payload = {
        "appName": "Catify",
        "description": fake.text(max_nb_chars=300).ljust(60, "."),
        "category": AppCategory.GAMES.value,
        "downloadURL": "https://example.com/download/catify",
        "logoURL": "https://example.com/logo.png",
        "features": ["Offline mode", "Dark theme"],
    }
    payload.update(overrides)
    return payload


def create_app(**overrides) -> App:
    """Save an active app owned by a random user."""
    name = overrides.pop("app_name", None) or fake.unique.word().title() + " App"
    fields = {
        "app_name": name,
        "slug": generate_slug(name) + "-" + fake.unique.lexify("????").lower(),
        "description": LISTING_DESCRIPTION,
        "category": AppCategory.TOOLS.value,
        "download_url": fake.url(),
        "owner_uid": fake.uuid4(),
        "status": AppStatus.ACTIVE.value,
    }
    fields.update(overrides)
    return App.objects.create(**fields)


def create_rating(app: App, user_id: str, value: int, review: str = "") -> Rating:
    """Save a rating row only; aggregates on the app are not touched."""
    return Rating.objects.create(
        app_id=app.id, user_id=user_id, rating=value, review=review
    )


def create_slide(order: int, **overrides) -> HeroSlide:
    fields = {
        "title": fake.sentence(nb_words=3).rstrip("."),
        "subtitle": fake.sentence(nb_words=6),
        "image_url": fake.image_url(),
        "order": order,
    }
    fields.update(overrides)
    return HeroSlide.objects.create(**fields)


def create_user(user_id: str | None = None, **overrides) -> User:
    fields = {
        "id": user_id or fake.uuid4(),
        "email": fake.email(),
        "name": fake.name(),
        "photo_url": fake.image_url(),
    }
    fields.update(overrides)
    return User.objects.create(**fields)
