import sys
import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _c:
    """terminal color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """assertion failure raised by the helpers below."""
    __test__ = False


# --- registration ---

def test(description: str) -> Callable:
    """register a function as a test case; the function stays callable (and pytest-collectable)."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


# keep pytest from collecting the decorator itself when a module does `test = suite.test`
test.__test__ = False


# --- assertions ---

def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "values differ") -> None:
    if not actual == expected:
        raise TestAssertionError(f"{message}: expected {expected!r}, got {actual!r}")


def assert_raises(exc_type: Type[BaseException], func: Callable[[], Any], message: str = "") -> BaseException:
    """call func and require it to raise exc_type; returns the exception for further checks."""
    try:
        func()
    except exc_type as e:
        return e
    raise TestAssertionError(message or f"expected {exc_type.__name__} to be raised")


# --- runner ---

def run(title: str = "test run") -> bool:
    """execute every registered test, print a report and return whether all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        description = test_item['description']
        test_start = time.perf_counter()
        error = None

        try:
            test_item['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        elapsed = (time.perf_counter() - test_start) * 1000
        _suite_state['results'].append({'passed': error is None, 'description': description, 'error': error})

        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {PASS_MARK}  {description} {_c.grey}({elapsed:.2f}ms){_c.reset}")
        else:
            print(f"  {_c.fail}fail{_c.reset}  {FAIL_MARK}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    passed = _print_summary(start_time)

    # allow several suites to run from one script
    _suite_state['tests'] = []
    return passed


def main(title: str) -> None:
    """run the registered tests and exit with a status code, for `python some_test.py`."""
    sys.exit(0 if run(title) else 1)


def _print_summary(start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count
    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count == 0
