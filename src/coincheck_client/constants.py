API_BASE = "https://coincheck.com"
DEFAULT_TIMEOUT_S = 20.0
USER_AGENT = "coincheck-client/0.1"

# Environment variables holding credentials
ENV_ACCESS_KEY = "COINCHECK_ACCESS_KEY"
ENV_SECRET_KEY = "COINCHECK_SECRET_KEY"

# Authentication headers
HEADER_KEY = "ACCESS-KEY"
HEADER_NONCE = "ACCESS-NONCE"
HEADER_SIGNATURE = "ACCESS-SIGNATURE"
AUTH_HEADERS = (HEADER_KEY, HEADER_NONCE, HEADER_SIGNATURE)
