"""
Matching Engine Constants

Defines all keyword tables, grade mappings, weights, thresholds and rule tables
used by the program matcher and the career path synthesizer.
All values are deterministic with no AI/ML components.
"""

from typing import Dict, List, Tuple

# =============================================================================
# SUBJECT CLASSIFICATION
# =============================================================================

OTHER_SUBJECT = "Other"

SUBJECT_CLASSIFICATION_VERSION = "1.0.0"

# Two seed tables are kept apart: the program matcher and the career path
# synthesizer historically classify courses differently. Order is significant,
# the first keyword found in the course name wins.
SUBJECT_KEYWORD_TABLES: Dict[str, List[Tuple[str, str]]] = {
    "program_matching": [
        ("math", "Mathematics"),
        ("algebra", "Mathematics"),
        ("calculus", "Mathematics"),
        ("physics", "Physics"),
        ("chemistry", "Chemistry"),
        ("biology", "Biology"),
        ("history", "History"),
        ("geography", "Geography"),
        ("english", "English"),
        ("literature", "English"),
        ("language", "Languages"),
        ("computer", "Computer Science"),
        ("programming", "Computer Science"),
        ("economics", "Economics"),
        ("business", "Business"),
        ("accounting", "Business"),
        ("psychology", "Psychology"),
        ("sociology", "Sociology"),
        ("art", "Arts"),
        ("music", "Arts"),
    ],
    "career_path": [
        ("math", "Mathematics"),
        ("physics", "Physics"),
        ("chemistry", "Chemistry"),
        ("biology", "Biology"),
        ("history", "Humanities"),
        ("geography", "Humanities"),
        ("civics", "Humanities"),
        ("english", "Languages"),
        ("language", "Languages"),
        ("computer", "Computer Science"),
        ("business", "Business"),
        ("economics", "Business"),
    ],
}

DEFAULT_SUBJECT_TABLE = "program_matching"

# =============================================================================
# GRADE SCALES
# =============================================================================

LETTER_GRADE_POINTS: Dict[str, float] = {
    "A+": 4.0, "A": 4.0, "A-": 3.7,
    "B+": 3.3, "B": 3.0, "B-": 2.7,
    "C+": 2.3, "C": 2.0, "C-": 1.7,
    "D+": 1.3, "D": 1.0, "D-": 0.7,
    "F": 0.0,
}

GRADE_SCALE_MAX = 4.0
PERCENTAGE_SCALE_MAX = 100.0

# Category average (4.0 scale) at which a subject area counts as a strength.
# Equivalent to 85% on the percentage scale.
ACADEMIC_STRENGTH_THRESHOLD = 3.4

# =============================================================================
# ASSESSMENT TRAITS
# =============================================================================

RIASEC_TRAITS: List[str] = [
    "realistic",
    "investigative",
    "artistic",
    "social",
    "enterprising",
    "conventional",
]

# Assessment key -> personality trait name
MULTIPLE_INTELLIGENCE_TRAITS: Dict[str, str] = {
    "logical_mathematical": "logical",
    "visual_spatial": "spatial",
    "verbal_linguistic": "linguistic",
    "interpersonal": "interpersonal",
    "intrapersonal": "intrapersonal",
    "musical": "musical",
    "bodily_kinesthetic": "bodily",
    "naturalistic": "naturalistic",
}

TOP_PREFERENCE_COUNT = 3

CAREER_ANCHOR_FIELDS: Dict[str, List[str]] = {
    "technical": ["Engineering", "Technology"],
    "managerial": ["Management", "Business"],
    "autonomy": ["Entrepreneurship", "Research"],
    "security": ["Finance", "Public Service"],
    "creativity": ["Arts", "Design", "Innovation"],
    "service": ["Healthcare", "Education", "Social Work"],
    "challenge": ["Science", "Law", "Consulting"],
    "lifestyle": ["Hospitality", "Wellness"],
}

RIASEC_CAREER_FIELDS: Dict[str, List[str]] = {
    "realistic": ["Engineering", "Agriculture", "Construction"],
    "investigative": ["Science", "Medicine", "Research"],
    "artistic": ["Arts", "Design", "Writing"],
    "social": ["Education", "Counseling", "Healthcare"],
    "enterprising": ["Business", "Law", "Politics"],
    "conventional": ["Finance", "Administration", "Information Technology"],
}

# =============================================================================
# MATCH SCORER WEIGHTS
# =============================================================================

GPA_BASELINE = 3.0            # Assumed minimum GPA requirement
GPA_MAX_POINTS = 10.0
SUBJECT_POOL_POINTS = 30.0    # Shared across the program's relevant subjects
ACADEMIC_MAX_POINTS = GPA_MAX_POINTS + SUBJECT_POOL_POINTS

TOP_TRAIT_COUNT = 2
TRAIT_TAG_POINTS = 20.0
PERSONALITY_MAX_POINTS = TOP_TRAIT_COUNT * TRAIT_TAG_POINTS

EXTRACURRICULAR_TAG_POINTS = 10.0
EXTRACURRICULAR_MAX_POINTS = 20.0

TOP_SUBJECT_COUNT = 3
SUBJECT_COURSE_POINTS = 30.0
CAREER_MAX_POINTS = TOP_SUBJECT_COUNT * SUBJECT_COURSE_POINTS

# Activity keyword -> program tag. First keyword found wins.
EXTRACURRICULAR_TAG_KEYWORDS: List[Tuple[str, str]] = [
    ("robot", "engineering"),
    ("engineering", "engineering"),
    ("coding", "technology"),
    ("programming", "technology"),
    ("hackathon", "technology"),
    ("computer", "technology"),
    ("science", "science"),
    ("math", "science"),
    ("debate", "law"),
    ("model un", "law"),
    ("student council", "leadership"),
    ("president", "leadership"),
    ("captain", "leadership"),
    ("entrepreneur", "business"),
    ("business", "business"),
    ("finance", "business"),
    ("first aid", "healthcare"),
    ("red cross", "healthcare"),
    ("health", "healthcare"),
    ("hospital", "healthcare"),
    ("volunteer", "social"),
    ("community", "social"),
    ("tutor", "education"),
    ("teach", "education"),
    ("farm", "agriculture"),
    ("garden", "agriculture"),
    ("environment", "agriculture"),
    ("music", "arts"),
    ("drama", "arts"),
    ("drawing", "design"),
    ("design", "design"),
    ("journalism", "writing"),
    ("writing", "writing"),
]

# =============================================================================
# RANKING CONFIGURATION
# =============================================================================

PROFILE_MATCH_LIMIT = 10

QUICK_MATCH_LIMIT = 5
QUICK_MATCH_THRESHOLD = 50   # Kept only when strictly above
QUICK_MATCH_CAP = 95
QUICK_SUBJECT_POINTS = 30
QUICK_TRAIT_POINTS = 20
QUICK_STRENGTH_POINTS = 15

# =============================================================================
# CAREER PATH SYNTHESIZER
# =============================================================================

# Declaration order is the tie-break: the first field wins a tie.
CAREER_FIELDS: List[str] = [
    "engineering",
    "business",
    "healthSciences",
    "socialSciences",
    "agriculture",
]

# (category, threshold, points per field). Awarded when the category average
# is strictly above the threshold.
SUBJECT_BONUS_RULES: List[Tuple[str, float, Dict[str, float]]] = [
    ("Mathematics", 3.5, {"engineering": 30, "business": 15}),
    ("Physics", 3.2, {"engineering": 20}),
    ("Computer Science", 3.0, {"engineering": 25}),
    ("Biology", 3.3, {"healthSciences": 30, "agriculture": 20}),
    ("Chemistry", 3.3, {"healthSciences": 25, "agriculture": 15}),
    ("Business", 3.2, {"business": 35}),
    ("Humanities", 3.2, {"socialSciences": 30, "business": 10}),
    ("Languages", 3.5, {"socialSciences": 20, "business": 15}),
]

RIASEC_NORMALIZED_MAX = 100.0

# RIASEC trait -> multiplier per field, applied to the 0-100 normalized score
RIASEC_FIELD_WEIGHTS: Dict[str, Dict[str, float]] = {
    "realistic": {"engineering": 0.15, "agriculture": 0.15},
    "investigative": {"engineering": 0.15, "healthSciences": 0.15, "agriculture": 0.1},
    "artistic": {"socialSciences": 0.15},
    "social": {"healthSciences": 0.15, "socialSciences": 0.2, "business": 0.05},
    "enterprising": {"business": 0.2, "agriculture": 0.05},
    "conventional": {"business": 0.1, "engineering": 0.05},
}

# Field accumulators are compared at this precision so float noise from the
# weights does not break declared-order ties.
FIELD_SCORE_PRECISION = 6

PATH_MATCH_CAP = 95
HIGH_MATCH_THRESHOLD = 85

BASE_REQUIREMENTS: List[str] = [
    "High school diploma or equivalent",
    "English language proficiency",
    "Entrance examination qualification",
]

FIELD_REQUIREMENTS: Dict[str, List[str]] = {
    "engineering": [
        "Minimum GPA of 3.0 in science subjects",
        "Strong background in Mathematics and Physics",
        "Problem-solving aptitude",
    ],
    "business": [
        "Minimum GPA of 2.8",
        "Strong communication skills",
        "Basic mathematics proficiency",
    ],
    "healthSciences": [
        "Minimum GPA of 3.5 in science subjects",
        "Strong background in Biology and Chemistry",
        "Commitment to patient care",
    ],
    "socialSciences": [
        "Minimum GPA of 3.0",
        "Strong reading and writing skills",
        "Interest in human behavior and society",
    ],
    "agriculture": [
        "Minimum GPA of 3.0 in science subjects",
        "Background in Biology and Chemistry",
        "Interest in sustainable development",
    ],
}

HIGH_MATCH_REQUIREMENT = "Highly recommended for students with your profile"

# Per-field keywords used by the templated recommendation text
FIELD_RECOMMENDATION_INFO: Dict[str, Dict[str, List[str]]] = {
    "engineering": {
        "subjects": ["Mathematics", "Physics", "Computer Science"],
        "traits": ["investigative", "realistic", "conventional"],
        "strengths": ["Problem Solving", "Analytical Thinking", "Technical Skills"],
    },
    "business": {
        "subjects": ["Economics", "Business Studies", "Mathematics"],
        "traits": ["enterprising", "conventional", "social"],
        "strengths": ["Leadership", "Communication", "Organization"],
    },
    "healthSciences": {
        "subjects": ["Biology", "Chemistry", "Mathematics"],
        "traits": ["social", "investigative", "realistic"],
        "strengths": ["Attention to Detail", "Empathy", "Scientific Knowledge"],
    },
    "socialSciences": {
        "subjects": ["History", "English", "Civics"],
        "traits": ["social", "artistic", "investigative"],
        "strengths": ["Communication", "Empathy", "Critical Thinking"],
    },
    "agriculture": {
        "subjects": ["Biology", "Chemistry", "Geography"],
        "traits": ["realistic", "investigative", "conventional"],
        "strengths": ["Practical Skills", "Scientific Knowledge", "Environmental Awareness"],
    },
}

RECOMMENDATION_TOP_COURSES = 3
RECOMMENDATION_TOP_TRAITS = 2
RECOMMENDATION_TOP_ACTIVITIES = 2

# =============================================================================
# ADAPTER TABLES
# =============================================================================

# Percentage average at which a broad area counts as a strength
STRENGTH_PERCENTAGE_THRESHOLD = 85.0

SUBJECT_AREAS: Dict[str, str] = {
    "Mathematics": "Mathematics",
    "Physics": "Science",
    "Chemistry": "Science",
    "Biology": "Science",
    "English": "Language",
    "Amharic": "Language",
    "History": "Humanities",
    "Geography": "Humanities",
    "Civics": "Humanities",
    "Economics": "Business",
    "Business Studies": "Business",
    "Accounting": "Business",
    "Information Technology": "Technology",
    "Art": "Arts",
    "Music": "Arts",
    "Physical Education": "Athletics",
}

ENGINE_VERSION = "1.0.0"
