"""Option keys, default region names and evaluation limits."""

OPTION_PREFIX: str = "region_ruler."

ALLOWED_REGION_NAME: str = OPTION_PREFIX + "allowed_region_name"
ALLOWED_REGEX_PATTERN: str = OPTION_PREFIX + "allowed_regex_pattern"
ALLOW_EMPTY: str = OPTION_PREFIX + "allow_empty"
CASE_SENSITIVE: str = OPTION_PREFIX + "case_sensitive"

# Separators accepted between entries of a list-valued option.
LIST_SEPARATORS: str = ",;"

DEFAULT_CASE_SENSITIVE: bool = False
DEFAULT_ALLOW_EMPTY: bool = True

# Seconds allowed for a single pattern match attempt.
REGEX_MATCH_TIMEOUT: float = 0.1

EMPTY_REGION_ARGUMENT: str = "[empty]"

DEFAULT_REGION_NAMES: frozenset[str] = frozenset(
    {
        "PUBLIC_MEMBERS",
        "PUBLIC_PROPERTIES",
        "PUBLIC_FIELDS",
        "INTERNAL_MEMBERS",
        "INTERNAL_PROPERTIES",
        "INTERNAL_FIELDS",
        "PRIVATE_MEMBERS",
        "PRIVATE_PROPERTIES",
        "PRIVATE_FIELDS",
        "PROTECTED_MEMBERS",
        "PROTECTED_PROPERTIES",
        "PROTECTED_FIELDS",
        "CONST_MEMBERS",
        "CONST_PROPERTIES",
        "CONST_FIELDS",
        "STATIC_MEMBERS",
        "STATIC_PROPERTIES",
        "STATIC_FIELDS",
        "CONSTRUCTOR",
        "DESTRUCTOR",
        "INITIALIZATION",
        "PUBLIC_METHODS",
        "INTERNAL_METHODS",
        "PRIVATE_METHODS",
        "PROTECTED_METHODS",
        "OVERRIDE_METHODS",
        "ABSTRACT_METHODS",
        "STATIC_METHODS",
        "EVENT_CALLBACKS",
        "MAIN",
        "HELPERS",
        "UTILITIES",
    }
)
