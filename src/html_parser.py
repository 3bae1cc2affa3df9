# Standard library imports
import logging
from urllib.parse import quote

# Third-party imports
import requests
from bs4 import BeautifulSoup

# Local imports
from constants import COURSE_TITLE_SELECTOR, FALLBACK_SEARCH_URL_TEMPLATE, HEADERS, REQUEST_TIMEOUT
from src.utils.result import ActionResult


def parse_course_titles(html_content, selector=COURSE_TITLE_SELECTOR):
    """Extracts trimmed, non-empty course titles from a page source in DOM order."""
    soup = BeautifulSoup(html_content, "html.parser")
    titles = []
    for element in soup.select(selector):
        title = element.get_text().strip()
        if title:
            titles.append(title)
    return titles


def fetch_course_titles(url, keyword, logger, selector=COURSE_TITLE_SELECTOR):
    """Fallback title lookup with requests when Chrome is not available."""
    search_url = FALLBACK_SEARCH_URL_TEMPLATE.format(url=url.rstrip("/"), keyword=quote(keyword))
    logger.log_message(f"Using requests-based fallback for: {search_url}")

    try:
        response = requests.get(search_url, headers=HEADERS, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.log_message(f"Error in requests-based title lookup: {e}", level=logging.ERROR)
        return ActionResult.failed(f"request failed: {e}", data=[])

    titles = parse_course_titles(response.text, selector)
    logger.log_message(f"Extracted {len(titles)} titles using requests fallback.")
    if not titles:
        return ActionResult.failed(f"no elements matched '{selector}'", data=titles)
    return ActionResult.ok(titles)
