import os

BASE_URL = "https://www.discudemy.com"
DEFAULT_SEARCH_URL = "https://www.discudemy.com/search"
# Static results page used when Chrome is not available
FALLBACK_SEARCH_URL_TEMPLATE = "{url}/{keyword}.jsf"
HEADERS = {"User-Agent": "Mozilla/5.0"}
DEFAULT_KEYWORD = "java"

# Page selectors
SEARCH_INPUT_SELECTOR = ".searchInput"
COURSE_TITLE_SELECTOR = ".content .card-header"
CATEGORY_BUTTON_XPATH = "//a[contains(@class,'catbtn') and contains(., '{name}')]"

# Waits (seconds)
TIMEOUT = 5  # Bounded wait for elements to appear
POLL_FREQUENCY = 0.5
DELAY = 2  # Pause after a category click
CLOSE_DELAY_SECONDS = 5  # Settle time before quitting the browser
REQUEST_TIMEOUT = 30

# Letters, digits, whitespace and : - . , ( ) ' ’
ALLOWED_TITLE_PATTERN = r"[a-zA-Z0-9\s:\-.,()'’]+"

# Browser
HEADLESS = True
CHROME_ARGUMENTS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--whitelisted-ips=''",
    "--start-maximized",
    "user-agent=Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
]
CHROME_EXCLUDE_SWITCHES = ["enable-automation"]

# Output
DEFAULT_OUTPUT_DIR = "reports"
LOG_DIR = os.environ.get("DISCUDEMY_LOG_DIR", "logs")
