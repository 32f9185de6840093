"""Constants used in business logic."""

# Schema version tag used as a prefix of every insights cache key. Bump it
# when the key format or the prompt template changes.
CACHE_KEY_VERSION = "v1"

# Defaults used when the optional request fields are missing or falsy
DEFAULT_AMOUNT = 1
DEFAULT_CONVERTED_AMOUNT = "1000"

# Gemini (generative language) API
DEFAULT_GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta"
# preview tier with new features
DEFAULT_PRIMARY_MODEL = "gemini-2.5-flash-preview-09-2025"
# stable tier
DEFAULT_SECONDARY_MODEL = "gemini-1.5-flash"
DEFAULT_MODEL_TIMEOUT = 30
GEMINI_API_KEY_ENV_VAR = "GEMINI_API_KEY"
RESPONSE_MIME_TYPE = "application/json"

# Text returned when the model response does not contain any candidate text
EMPTY_INSIGHT = "{}"

# Error messages returned to the UI
METHOD_NOT_ALLOWED = "Method Not Allowed"
MISSING_CURRENCY_DATA = "Missing currency data"
INVALID_AMOUNT = "Invalid amount"
API_KEY_NOT_CONFIGURED = f"{GEMINI_API_KEY_ENV_VAR} not configured"
SERVICE_UNAVAILABLE = "AI service temporarily unavailable"

# Prompt sent to the model, it must produce strict JSON described below
INSIGHTS_PROMPT_TEMPLATE = """Act as a local travel expert for {amount} {source} → {converted_amount} {target}.

Return a strict JSON (no markdown) with:

{{
  "headline": "3-5 word catchy summary",
  "buy": "1 short sentence: what this amount buys",
  "tip": "1 short sentence: cultural or money tip",
  "safety": {{
    "score": "1-10",
    "note": "1 short sentence safety advice"
  }},
  "weather": {{
    "forecast": "1 short sentence weather advice",
    "condition": "usually sunny/moderate/humid/rainy"
  }},
  "must_things": {{
    "foods": ["food1", "food2", "food3"],
    "places": ["place1", "place2", "place3"]
  }}
}}

Keep everything short, fast to read, and valid JSON only."""

# CORS defaults, the UI is served from arbitrary origins
DEFAULT_CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
DEFAULT_CORS_ALLOW_HEADERS = [
    "X-CSRF-Token",
    "X-Requested-With",
    "Accept",
    "Accept-Version",
    "Content-Length",
    "Content-MD5",
    "Content-Type",
    "Date",
    "X-Api-Version",
]

# Environment variable with path to configuration file, set by the CLI entry
# point so that every Uvicorn worker can load the configuration
CONFIG_PATH_ENV_VAR = "TRAVEL_INSIGHTS_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "travel-insights.yaml"

# cache constants
CACHE_TYPE_MEMORY = "memory"
CACHE_TYPE_NOOP = "noop"
