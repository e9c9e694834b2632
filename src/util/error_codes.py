# Validation (1000-1999)
UPDATE_NOT_A_MAPPING = 1001
INVALID_HOOK_FILTER = 1002

# Not Found (2000-2999)
BOT_NOT_FOUND = 2001

# Authorization (3000-3999)
INVALID_WEBHOOK_AUTH_KEY = 3001

# External Service (5000-5999)
BOT_API_REQUEST_FAILED = 5001
BOTAN_REQUEST_FAILED = 5002

# Configuration (7000-7999)
INVALID_BOT_CLIENT_SOURCE = 7001
MISSING_BOT_CONTEXT = 7002
HOOK_ON_BASE_CONTROLLER = 7003

# Internal (8000-8999)
INVALID_HOOK_RESULT = 8001
