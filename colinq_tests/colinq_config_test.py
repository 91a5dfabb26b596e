import logging
import suite
from colinq import config, configure, CollectionConfig, list_of

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


def _restore(saved: dict) -> None:
    configure(**saved)


@test("defaults guard iteration")
def test_defaults():
    fresh = CollectionConfig()
    assert_that(fresh.guard_iteration, "guard is on by default")
    assert_equal(fresh.log_level, 'WARNING', "default log level")


@test("log levels are normalized and validated")
def test_log_level_validation():
    assert_equal(CollectionConfig(log_level='debug').log_level, 'DEBUG', "upper-cased")
    assert_raises(ValueError, lambda: CollectionConfig(log_level='chatty'))


@test("configure rejects unknown options without changing anything")
def test_configure_unknown():
    before = config.guard_iteration
    assert_raises(TypeError, lambda: configure(guard_iteration=not before, colour='red'))
    assert_equal(config.guard_iteration, before, "live config untouched")


@test("configure applies the log level to the package logger")
def test_configure_log_level():
    saved = {'guard_iteration': config.guard_iteration, 'log_level': config.log_level}
    try:
        configure(log_level='debug')
        assert_equal(logging.getLogger('colinq').level, logging.DEBUG, "package logger level")
        assert_raises(ValueError, lambda: configure(log_level='loud'))
        assert_equal(config.log_level, 'DEBUG', "failed configure keeps the previous level")
    finally:
        _restore(saved)


@test("turning the guard off allows mutation inside callbacks")
def test_guard_disabled():
    saved = {'guard_iteration': config.guard_iteration, 'log_level': config.log_level}
    try:
        configure(guard_iteration=False)
        items = list_of(1, 2, 3)
        # add once, then stop
        items.until(lambda x, i: items.add(x * 10) or False)
        assert_equal(items.to_array(), [1, 2, 3, 10], "mutation went through")
    finally:
        _restore(saved)
    assert_that(config.guard_iteration == saved['guard_iteration'], "restored")


if __name__ == "__main__":
    suite.main("colinq configuration test suite")
