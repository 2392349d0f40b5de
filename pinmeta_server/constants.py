"""Closed vocabularies for uploads and default user preferences."""

CATEGORIES = [
    "Nature",
    "Architecture",
    "Fashion",
    "Food",
    "Travel",
    "Art",
    "Technology",
    "Animals",
    "Interior",
    "Photography",
]

TAGS_POOL = [
    "minimal",
    "futuristic",
    "vintage",
    "aesthetic",
    "cozy",
    "dark",
    "colorful",
    "abstract",
    "urban",
    "landscape",
    "portrait",
    "retro",
    "neon",
    "pastel",
    "monochrome",
    "cute",
]

GUEST_USER_ID = "guest"

# Default admin account created by seed_data()
ADMIN_USER = {
    "user_id": "admin_01",
    "username": "Admin",
    "email": "admin@pinmeta.com",
    "password": "password",
    "preferences": ["minimal", "futuristic"],
}
