
# Inquiry categories offered by the contact form, in display order
INQUIRY_CATEGORIES = [
    {"value": "general", "label": "General Inquiry"},
    {"value": "maintenance", "label": "Maintenance Request"},
    {"value": "noise", "label": "Noise Complaint"},
    {"value": "bylaws", "label": "By-law Query"},
    {"value": "financial", "label": "Financial Question"},
    {"value": "other", "label": "Other"},
]

INQUIRY_CATEGORY_VALUES = frozenset(category["value"] for category in INQUIRY_CATEGORIES)

# Demonstration data loaded into the maintenance tracker at process start
SEED_UPCOMING_MAINTENANCE = [
    {
        "type": "Regular",
        "task": "Building Exterior Cleaning",
        "date": "April 15, 2025",
        "status": "scheduled",
    },
    {
        "type": "Inspection",
        "task": "Fire Safety Equipment Check",
        "date": "April 22, 2025",
        "status": "scheduled",
    },
    {
        "type": "Repair",
        "task": "Lobby Lighting Replacement",
        "date": "April 28, 2025",
        "status": "pending parts",
    },
]

RECENT_MAINTENANCE = [
    {
        "type": "Regular",
        "task": "Garden Maintenance",
        "date": "March 30, 2025",
        "status": "completed",
    },
    {
        "type": "Repair",
        "task": "Garage Door Adjustment",
        "date": "March 25, 2025",
        "status": "completed",
    },
    {
        "type": "Emergency",
        "task": "Water Leak in Common Area",
        "date": "March 20, 2025",
        "status": "resolved",
    },
]

# Maintenance request form choices
ISSUE_TYPES = [
    {"value": "plumbing", "label": "Plumbing"},
    {"value": "electrical", "label": "Electrical"},
    {"value": "structural", "label": "Structural"},
    {"value": "cleaning", "label": "Cleaning"},
    {"value": "security", "label": "Security"},
    {"value": "other", "label": "Other"},
]

ISSUE_LOCATIONS = [
    {"value": "entrance", "label": "Main Entrance"},
    {"value": "lobby", "label": "Lobby"},
    {"value": "hallway", "label": "Hallways"},
    {"value": "stairs", "label": "Stairwell"},
    {"value": "elevator", "label": "Elevator"},
    {"value": "parking", "label": "Parking Area"},
    {"value": "garden", "label": "Garden/Outdoor Area"},
    {"value": "roof", "label": "Roof"},
    {"value": "other", "label": "Other"},
]
