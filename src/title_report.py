# Standard library imports
import json
import logging
import os
import re
import time

# Local imports
from constants import ALLOWED_TITLE_PATTERN
from src.title_validator import disallowed_characters


def build_report(url, keyword, titles, invalid_titles, pattern=ALLOWED_TITLE_PATTERN, search_error=None):
    """Summary of one title check, ready to be dumped as JSON."""
    return {
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        "url": url,
        "keyword": keyword,
        "pattern": pattern,
        "search_error": search_error,
        "total_titles": len(titles),
        "total_invalid": len(invalid_titles),
        "titles": list(titles),
        "invalid_titles": [
            {"title": title, "disallowed_characters": disallowed_characters(title, pattern)}
            for title in invalid_titles
        ],
    }


def save_report(report, output_dir, logger):
    """Writes the report to output_dir and returns its path, or None on failure."""
    safe_keyword = re.sub(r"\W+", "_", report.get("keyword") or "")[:30] or "search"
    filename = f"title_check_{safe_keyword}_{time.strftime('%Y%m%d_%H%M%S')}.json"
    report_path = os.path.join(output_dir, filename)
    try:
        os.makedirs(output_dir, exist_ok=True)
        with open(report_path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)
        logger.log_message(f"Saved title check report to {report_path}")
        return report_path
    except OSError as e:
        logger.log_message(f"Failed to save title check report: {e}", level=logging.ERROR)
        return None
