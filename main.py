import argparse
import logging
import sys

from constants import (
    ALLOWED_TITLE_PATTERN,
    CLOSE_DELAY_SECONDS,
    DEFAULT_KEYWORD,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SEARCH_URL,
    HEADLESS,
    TIMEOUT,
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='DiscUdemy course title checker')

    # Search options
    search_group = parser.add_argument_group('Search Options')
    search_group.add_argument('--url', type=str, default=DEFAULT_SEARCH_URL,
                              help=f'Search page URL (default: {DEFAULT_SEARCH_URL})')
    search_group.add_argument('--keyword', type=str, default=DEFAULT_KEYWORD,
                              help=f'Keyword to search for (default: {DEFAULT_KEYWORD})')
    search_group.add_argument('--category', type=str,
                              help='Category button to click before collecting titles')

    # Validation options
    validation_group = parser.add_argument_group('Validation Options')
    validation_group.add_argument('--pattern', type=str, default=ALLOWED_TITLE_PATTERN,
                                  help='Allowed title pattern, full match. Offending characters are only '
                                       'reported for a single character class such as [a-z ]+ '
                                       f'(default: {ALLOWED_TITLE_PATTERN})')

    # Browser options
    browser_group = parser.add_argument_group('Browser Options')
    browser_group.add_argument('--timeout', type=float, default=TIMEOUT,
                               help=f'Seconds to wait for page elements (default: {TIMEOUT})')
    browser_group.add_argument('--close-delay', type=float, default=CLOSE_DELAY_SECONDS,
                               help=f'Seconds to wait before closing the browser (default: {CLOSE_DELAY_SECONDS})')
    browser_group.add_argument('--no-headless', dest='headless', action='store_false', default=HEADLESS,
                               help='Show the browser window')

    # Output options
    parser.add_argument('--output-dir', type=str, default=DEFAULT_OUTPUT_DIR,
                        help=f'Directory for JSON reports (default: {DEFAULT_OUTPUT_DIR})')
    parser.add_argument('--no-report', action='store_true',
                        help='Do not write a JSON report')

    return parser.parse_args(argv)


def run(args, bot_factory=None):
    """Runs one search and title check. Returns the process exit code."""
    from src.discudemy_bot import DiscUdemyBot
    from src.title_report import build_report, save_report
    from src.title_validator import build_failure_message, find_invalid
    from src.utils.logger import Logger

    logger = Logger("TitleCheck", see_time=True, console_log=True)
    bot_factory = bot_factory or DiscUdemyBot
    try:
        with bot_factory(args.url, timeout=args.timeout, close_delay=args.close_delay,
                         headless=args.headless) as bot:
            search_result = bot.search(args.keyword)
            category_result = None
            if search_result and args.category:
                category_result = bot.click_category_by_name(args.category)
            extract_result = bot.extract_titles()
            titles = list(bot.course_titles)

        error = None
        if not search_result:
            error = search_result.reason
        elif category_result is not None and not category_result:
            error = category_result.reason
        elif not extract_result:
            error = extract_result.reason

        invalid_titles = find_invalid(titles, args.pattern)

        print(f"Searched keyword: {args.keyword}")
        print(f"Courses found: {len(titles)}")
        for title in titles:
            print(f"- {title}")

        if not args.no_report:
            report = build_report(args.url, args.keyword, titles, invalid_titles, args.pattern, search_error=error)
            save_report(report, args.output_dir, logger)

        if error:
            logger.log_message(f"Title check could not run: {error}", level=logging.ERROR)
            return 1
        if invalid_titles:
            print(build_failure_message(invalid_titles, args.pattern))
            return 1

        print("All course titles match the allowed pattern.")
        return 0
    finally:
        logger.cleanup()


def main(argv=None):
    args = parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
