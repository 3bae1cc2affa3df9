# Standard library imports
import logging
import time

# Third-party imports
from selenium import webdriver
from selenium.common.exceptions import TimeoutException
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait
from webdriver_manager.chrome import ChromeDriverManager

# Local imports
from constants import *
from src.html_parser import fetch_course_titles
from src.utils.logger import Logger
from src.utils.result import ActionResult


def validate_url(url):
    return url is not None and url.startswith("http")


class DiscUdemyBot:
    """Selenium bot that searches DiscUdemy and collects the course titles it shows.

    The bot only starts a browser for an http(s) URL. With any other URL it
    stays inert and every interaction returns a failed ActionResult. When
    Chrome cannot be started the bot falls back to fetching the static
    results page with requests.

    Use it as a context manager so the browser is always released:

        with DiscUdemyBot(DEFAULT_SEARCH_URL) as bot:
            bot.search("java")
            result = bot.extract_titles()
    """

    def __init__(self, url, timeout=TIMEOUT, poll_frequency=POLL_FREQUENCY, delay=DELAY,
                 close_delay=CLOSE_DELAY_SECONDS, headless=HEADLESS, driver_factory=None, logger=None):
        self.url = None
        self.timeout = timeout
        self.poll_frequency = poll_frequency
        self.delay = delay
        self.close_delay = close_delay
        self.headless = headless
        self._owns_logger = logger is None
        self.logger = logger or Logger("DiscUdemyBot", see_time=True, console_log=True)

        self.driver = None
        self.wait = None
        self.action_provider = None
        self.course_titles = []
        self._fallback_titles = []
        self._closed = False

        if not validate_url(url):
            self.logger.log_message(f"Invalid URL {url!r}; browser session not created.", level=logging.WARNING)
            return

        self.url = url
        self.driver = (driver_factory or self._setup_selenium)()
        if self.driver is None:
            self.logger.log_message("Chrome WebDriver not available. Will use requests-based fallback for titles.", level=logging.WARNING)
            return

        self.wait = WebDriverWait(self.driver, self.timeout, poll_frequency=self.poll_frequency)
        self.action_provider = ActionChains(self.driver)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    @property
    def is_ready(self):
        """True when a live browser session exists."""
        return self.driver is not None and not self._closed

    @property
    def uses_fallback(self):
        return self.url is not None and self.driver is None and not self._closed

    def _setup_selenium(self):
        """Sets up the Chrome WebDriver, returning None when Chrome is unavailable."""
        options = webdriver.ChromeOptions()
        if self.headless:
            options.add_argument("--headless")
        for argument in CHROME_ARGUMENTS:
            options.add_argument(argument)
        options.add_experimental_option("excludeSwitches", CHROME_EXCLUDE_SWITCHES)
        options.add_experimental_option("useAutomationExtension", False)

        try:
            service = Service(ChromeDriverManager().install())
            driver = webdriver.Chrome(service=service, options=options)
            self.logger.log_message("Successfully initialized Chrome WebDriver.")
            return driver
        except Exception as e:
            self.logger.log_message(f"Error setting up Chrome WebDriver: {e}", level=logging.ERROR)
            try:
                # Fallback to direct instantiation (Selenium Manager)
                driver = webdriver.Chrome(options=options)
                self.logger.log_message("Successfully initialized Chrome WebDriver with fallback method.")
                return driver
            except Exception as e2:
                self.logger.log_message(f"Failed to initialize Chrome WebDriver with fallback: {e2}", level=logging.ERROR)
                return None

    def _inert_result(self):
        if self._closed:
            return ActionResult.failed("browser session already closed")
        return ActionResult.failed("bot is not initialized (invalid URL)")

    def get_driver(self):
        return self.driver

    def get_course_titles(self):
        return self.course_titles

    def connect(self):
        self.driver.get(self.url)

    def wait_seconds(self, seconds):
        if self.action_provider is None:
            time.sleep(seconds)
            return
        self.action_provider.pause(seconds).perform()

    def search(self, keyword):
        """Opens the search page and submits ``keyword``."""
        if self.uses_fallback:
            result = fetch_course_titles(self.url, keyword, self.logger)
            self._fallback_titles = result.data or []
            return result
        if not self.is_ready:
            return self._inert_result()

        try:
            self.connect()
            search_box = self.wait.until(
                lambda driver: driver.find_element(By.CSS_SELECTOR, SEARCH_INPUT_SELECTOR)
            )
        except TimeoutException:
            self.logger.log_message(
                f"Search failed: search input '{SEARCH_INPUT_SELECTOR}' not found within {self.timeout}s",
                level=logging.WARNING,
            )
            return ActionResult.failed("search input not found before timeout")
        except Exception as e:
            self.logger.log_message(f"Search failed: {e}", level=logging.WARNING)
            return ActionResult.failed(f"search failed: {e}")

        try:
            search_box.send_keys(keyword + Keys.ENTER)
            # Cards on the search page itself must not be read as results
            self.wait.until(EC.staleness_of(search_box))
        except TimeoutException:
            self.logger.log_message(
                f"Search failed: results page for '{keyword}' did not load within {self.timeout}s",
                level=logging.WARNING,
            )
            return ActionResult.failed("results page not loaded before timeout")
        except Exception as e:
            self.logger.log_message(f"Search failed: {e}", level=logging.WARNING)
            return ActionResult.failed(f"search failed: {e}")

        self.logger.log_message(f"Submitted search for '{keyword}'")
        return ActionResult.ok()

    def click_category_by_name(self, category_name):
        if not self.is_ready:
            return self._inert_result()

        try:
            category_button = self.driver.find_element(By.XPATH, CATEGORY_BUTTON_XPATH.format(name=category_name))
            category_button.click()
            self.wait_seconds(self.delay)
        except Exception as e:
            self.logger.log_message(
                f"Category '{category_name}' not found or not clickable. {e}", level=logging.WARNING
            )
            return ActionResult.failed(f"category '{category_name}' not clickable: {e}")
        return ActionResult.ok()

    def _store_title(self, text):
        title = (text or "").strip()
        if title:
            self.course_titles.append(title)

    def extract_titles(self):
        """Rebuilds ``course_titles`` from the result cards currently on the page.

        The result's data is the title list. On failure the list keeps
        whatever was collected before the error.
        """
        self.course_titles.clear()

        if self.uses_fallback:
            for text in self._fallback_titles:
                self._store_title(text)
            if not self.course_titles:
                return ActionResult.failed("no course titles found", data=self.course_titles)
            return ActionResult.ok(self.course_titles)
        if not self.is_ready:
            return self._inert_result()

        try:
            title_elements = self.wait.until(
                lambda driver: driver.find_elements(By.CSS_SELECTOR, COURSE_TITLE_SELECTOR)
            )
            for element in title_elements:
                self._store_title(element.text)
        except TimeoutException:
            self.logger.log_message(
                f"Error during course extraction: no '{COURSE_TITLE_SELECTOR}' elements within {self.timeout}s",
                level=logging.WARNING,
            )
            return ActionResult.failed("no result elements before timeout", data=self.course_titles)
        except Exception as e:
            self.logger.log_message(f"Error during course extraction: {e}", level=logging.ERROR)
            return ActionResult.failed(f"extraction failed: {e}", data=self.course_titles)

        self.logger.log_message(f"Number of courses: {len(self.course_titles)}")
        return ActionResult.ok(self.course_titles)

    def search_by_keyword(self, keyword):
        """Searches, stores the titles and closes the browser."""
        search_result = self.search(keyword)
        result = self.extract_titles()
        self.close()

        print(f"Searched keyword: {keyword}")
        print(f"Courses found: {len(self.course_titles)}")
        for title in self.course_titles:
            print(f"- {title}")
        return result if search_result else search_result

    def close(self):
        """Releases the browser after a short settle delay. Safe to call twice."""
        if self._closed:
            return
        self._closed = True

        if self.driver is not None:
            try:
                time.sleep(self.close_delay)
                self.driver.quit()
                self.logger.log_message("Browser closed.")
            except Exception as e:
                self.logger.log_message(f"Driver close failed: {e}", level=logging.ERROR)
            finally:
                self.driver = None
                self.wait = None
                self.action_provider = None

        if self._owns_logger:
            self.logger.cleanup()
