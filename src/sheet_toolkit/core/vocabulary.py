"""
Module: core.vocabulary

Purpose:
    Fixed option lists for the constrained instruction fields. The
    analysis service is asked to pick from these lists and the editing
    form offers them as choices; the builder itself accepts any string,
    so check_record() only reports mismatches.

Key Functions:
    - options_for(): Options for a field key
    - check_record(): List values outside the vocabulary

Dependencies:
    - core.models.fields: FIELD_ORDER, FieldRecord

Used By:
    - cli: Warns about off-vocabulary values before building
"""

from __future__ import annotations

import logging
from typing import List

from .models.fields import FIELD_ORDER, FREE_TEXT_KEY, FieldRecord

logger = logging.getLogger(__name__)


VOCABULARY: dict[str, tuple[str, ...]] = {
    "purpose": (
        "SNS Post", "TikTok Thumbnail / Short Video Use", "YouTube Thumbnail",
        "E-commerce Product Image", "Ad Banner", "Blog / Media Illustration Image",
        "Profile Icon", "Presentation Illustration", "LINE-style Stamp Image",
        "App Promotional Visual", "Event Announcement Visual",
    ),
    "subject": (
        "Human", "Animal", "Food", "Vehicle", "Building", "Landscape",
        "Fantasy creature", "Character", "Robot", "Pet", "Plant", "Furniture",
        "Home Appliance", "Gadget", "Art / Abstract Object", "Clothing",
        "Cosmetics", "Accessories", "Dish", "Drink",
    ),
    "situation": (
        "Standing", "Sitting", "Walking", "Running", "Working", "Eating",
        "Speaking", "Posing", "Using smartphone", "Using computer", "Reading",
        "Sleeping", "Relaxing", "Driving", "Shopping", "Taking a photo",
        "Being photographed", "Exercising", "Dancing", "Studying", "Cooking",
        "Cleaning", "Playing games", "Talking on the phone",
    ),
    "age_range": (
        "Newborn / 0–1 month", "Infant / 1 month–1 year", "Toddler / 1–3 years",
        "Preschooler / 3–6 years", "Lower elementary / Grades 1–3",
        "Upper elementary / Grades 4–6", "Junior high / 12–15 years",
        "High school / 15–18 years", "College / 18–22 years",
        "Young adult / 20–29 years", "Adult / 30–39 years",
        "Middle-aged / 40–59 years", "Senior / 60–74 years", "Elderly / 75+ years",
    ),
    "gender": ("Male", "Female", "Non-binary", "Unknown"),
    "nationality": (
        "Japan", "China", "Korea", "Taiwan", "India", "USA", "Canada",
        "United Kingdom", "France", "Germany", "Italy", "Spain", "Russia",
        "Brazil", "Mexico", "Australia", "Turkey", "Saudi Arabia",
        "United Arab Emirates", "Egypt", "South Africa",
    ),
    "style": (
        "Realistic", "Hyper-realistic", "Photo-realistic", "Cinematic",
        "Natural light photo", "Portrait photo", "Fashion magazine style",
        "Street snap style", "Product photo", "High-end camera shot",
        "Smartphone selfie style", "Smartphone photo style", "Anime", "Manga",
        "Watercolor", "Oil painting", "Fantasy", "Cyberpunk", "3D render",
    ),
    "shot_distance": (
        "Extreme close-up", "Close-up", "Medium close-up", "Medium shot",
        "Full shot", "Long shot",
    ),
    "camera_angle": ("Eye-level", "Low angle", "High angle", "Top view", "Over-the-shoulder"),
    "lighting_color": (
        "Natural light", "Soft light", "Hard light / Hard shadows",
        "Dramatic lighting", "Backlight", "Top light", "Spotlight", "Neon light",
        "Low light", "Dim light", "Night lighting", "Isolated spotlight",
        "Warm tone", "Cool tone",
    ),
    "background": (
        "Studio", "Living room", "Bedroom", "Kitchen", "Office / Study", "Cafe",
        "Classroom", "Shop interior", "Street", "Park", "Forest", "Beach",
        "Mountain", "Sunset outdoors", "Night city", "Futuristic / Sci-fi",
        "Fantasy world", "Space", "Factory", "Ruins", "Abstract",
        "Gradient background", "White background", "Black background",
    ),
    "city": (
        "Tokyo", "Kyoto", "Osaka", "Sapporo", "Fukuoka", "New York",
        "Los Angeles", "San Francisco", "Paris", "London", "Berlin", "Rome",
        "Beijing", "Shanghai", "Shenzhen", "Seoul", "Bangkok",
    ),
    "location_type": (
        "Downtown", "Residential area", "Business district", "Tourist spot",
        "Old town", "Shopping street", "Park / Plaza", "Riverside / Lakeside",
        "Harbor", "Beach area", "Airport", "Station", "Bus terminal",
        "Highway / Main road", "Alleyway", "Market", "Stadium area",
        "Campus / School area", "Industrial area", "Suburb",
    ),
    "output_format": ("PNG", "JPG"),
    "aspect_ratio": ("1:1", "3:4", "4:3", "9:16", "16:9", "21:9"),
}


def options_for(key: str) -> tuple[str, ...]:
    """
    Allowed values for a field.

    Returns an empty tuple for the free-text field.

    Raises:
        KeyError: If key is not a known field
    """
    if key == FREE_TEXT_KEY:
        return ()
    return VOCABULARY[key]


def check_record(record: FieldRecord) -> List[str]:
    """
    Report values that are not in their field's vocabulary.

    Empty values and the free-text field are never reported. The result
    is advisory: the builder renders whatever strings it is given.

    Args:
        record: Record to check

    Returns:
        List of human-readable issue strings (empty when all values match)

    Example:
        >>> check_record(FieldRecord.from_mapping({"gender": "Robot"}))
        ["Gender: 'Robot' is not a known option"]
    """
    issues: List[str] = []
    for label, key, value in record.rows(FIELD_ORDER):
        if key == FREE_TEXT_KEY or not value:
            continue
        if value not in VOCABULARY.get(key, ()):
            issues.append(f"{label}: {value!r} is not a known option")
    if issues:
        logger.debug(f"Record has {len(issues)} off-vocabulary values")
    return issues
