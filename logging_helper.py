import logging

RED = "\033[91m"
YELLOW = "\033[93m"
GREEN = "\033[92m"
RESET = "\033[0m"
WHITE = "\033[97m"

STATUS_COLORS = {
    "error": RED,
    "warning": YELLOW,
    "good": GREEN,
}

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s.%(msecs)03d - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger("posts")


def log_status(status, message, extra=""):
    color = STATUS_COLORS.get(status.lower(), WHITE)
    logger.info(f"{color}{message}{extra}{RESET}")


def log_request(request):
    log_status("info", "Executing request: ", f"{request.method} {request.url}")


def log_response(response):
    log_status("info", "Response is: ", f"{response.status_code} {response.reason_phrase}")


def log_status_check(response, expected_status):
    """Green line when the status matches, red line with both codes when it doesn't."""
    request = response.request
    if response.status_code == expected_status:
        log_status("good", f"{request.method} {request.url} -> ", str(response.status_code))
    else:
        log_status(
            "error",
            f"{request.method} {request.url} -> ",
            f"expected {expected_status}, got {response.status_code}",
        )
