import suite
from colinq import Event, EventArgs, IEvent, CollectionModifiedError

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


class ProgressArgs(EventArgs):
    def __init__(self, percent: int):
        self.percent = percent


class Downloader:
    """exposes only the subscribe side of its event, the way a component would"""

    def __init__(self):
        self._progress = Event()

    @property
    def progress(self) -> IEvent:
        return self._progress

    def report(self, percent: int) -> None:
        Event.invoke_event(self._progress, self, ProgressArgs(percent))


@test("invoke calls handlers in registration order with sender and args")
def test_invoke_order():
    calls = []
    event = Event()
    event.add_handler(lambda sender, e: calls.append(('first', sender, e)))
    event.add_handler(lambda sender, e: calls.append(('second', sender, e)))
    event.invoke('me', EventArgs.empty)
    assert_equal([c[0] for c in calls], ['first', 'second'], "order")
    assert_that(all(c[1] == 'me' and c[2] is EventArgs.empty for c in calls), "sender and args passed")


@test("add_handler returns the handler so it can be removed")
def test_add_returns_handler():
    calls = []
    event = Event()
    handler = event.add_handler(lambda s, e: calls.append(1))
    event.remove_handler(handler)
    event.invoke(None, EventArgs.empty)
    assert_equal(calls, [], "removed handler not called")


@test("remove_handler drops every registration of the handler")
def test_remove_all_registrations():
    calls = []

    def handler(sender, e):
        calls.append(sender)

    event = Event()
    event.add_handler(handler)
    event.add_handler(handler)
    assert_equal(event.handler_count(), 2, "registered twice")
    event.remove_handler(handler)
    assert_equal(event.handler_count(), 0, "both registrations removed")


@test("remove_all_handlers and clear_event silence the event")
def test_clear_handlers():
    calls = []
    event = Event()
    event.add_handler(lambda s, e: calls.append(1))
    event.remove_all_handlers()
    event.invoke(None, EventArgs.empty)

    event.add_handler(lambda s, e: calls.append(2))
    Event.clear_event(event)
    event.invoke(None, EventArgs.empty)
    assert_equal(calls, [], "no handler should run")


@test("components can raise events known only as IEvent")
def test_component_event():
    received = []
    downloader = Downloader()
    downloader.progress.add_handler(lambda sender, e: received.append((sender, e.percent)))
    downloader.report(50)
    downloader.report(100)
    assert_equal([p for _, p in received], [50, 100], "progress values")
    assert_that(received[0][0] is downloader, "sender is the component")


@test("a handler exception stops dispatch and propagates")
def test_handler_exception():
    calls = []
    event = Event()

    def failing(sender, e):
        raise ValueError("handler failed")

    event.add_handler(failing)
    event.add_handler(lambda s, e: calls.append(1))
    assert_raises(ValueError, lambda: event.invoke(None, EventArgs.empty))
    assert_equal(calls, [], "later handler not reached")


@test("unsubscribing from inside a handler is rejected")
def test_unsubscribe_during_invoke():
    event = Event()

    def once(sender, e):
        event.remove_handler(once)

    event.add_handler(once)
    assert_raises(CollectionModifiedError, lambda: event.invoke(None, EventArgs.empty))
    assert_equal(event.handler_count(), 1, "handler list untouched")


@test("static helpers reject objects that are not events")
def test_static_helpers_type_check():
    assert_raises(TypeError, lambda: Event.invoke_event(object(), None, EventArgs.empty))


if __name__ == "__main__":
    suite.main("colinq events test suite")
