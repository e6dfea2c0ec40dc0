"""
Error codes returned for request validation failures.

Codes are keyed by request field alias, then by pydantic error type. The
"*" entry is the fallback for any other error type on that field.
"""

FIELD_ERROR_CODES: dict[str, dict[str, str]] = {
    "inputText": {
        "*": "INPUT_TEXT_INVALID",
    },
    "front": {
        "missing": "FRONT_REQUIRED",
        "string_too_short": "FRONT_REQUIRED",
        "string_too_long": "FRONT_TOO_LONG",
        "*": "FRONT_INVALID",
    },
    "back": {
        "missing": "BACK_REQUIRED",
        "string_too_short": "BACK_REQUIRED",
        "string_too_long": "BACK_TOO_LONG",
        "*": "BACK_INVALID",
    },
    "sourceType": {
        "missing": "SOURCE_TYPE_REQUIRED",
        "*": "SOURCE_TYPE_INVALID",
    },
    "generationSourceId": {
        "*": "GENERATION_SOURCE_ID_INVALID",
    },
}

# Errors about the body as a whole, e.g. the size of the flashcard batch
BODY_ERROR_CODES: dict[str, str] = {
    "too_short": "AT_LEAST_ONE_FLASHCARD_REQUIRED",
    "too_long": "TOO_MANY_FLASHCARDS",
}

BODY_INVALID_CODE = "REQUEST_BODY_INVALID"

# An array item that is not an object
ITEM_INVALID_CODE = "FLASHCARD_INVALID"

# Error type of a body that is not valid JSON
JSON_INVALID_TYPE = "json_invalid"
