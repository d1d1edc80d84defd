"""
Tests for MockFace: end-to-end Interest/Data exchange through the local tables.
"""

import asyncio

import pytest
from ndn.encoding import Name
from ndn.types import InterestTimeout

from ndn_mock import Data, DispatchOutcome, FaceClosedError, MockFace


def content_of(recorder):
    return [bytes(data.content) for _interest, data in recorder.calls]


class TestResponses:
    """Canned responses added to the face."""

    def test_response_reaches_on_data(self, face, recorder):
        face.add_response('/ndn/ping', b'R1')
        face.express_interest('/ndn/ping', on_data=recorder)
        assert recorder.calls == []

        assert face.process_events() == 1
        assert content_of(recorder) == [b'R1']
        interest, data = recorder.calls[0]
        assert Name.to_str(interest.name) == '/ndn/ping'
        assert Name.to_str(data.name) == '/ndn/ping'

    def test_response_repeats_for_every_interest(self, face, recorder):
        face.add_response('/a', 'A')
        face.express_interest('/a', on_data=recorder)
        face.process_events()
        face.express_interest('/a', on_data=recorder)
        face.process_events()
        assert content_of(recorder) == [b'A', b'A']

    def test_str_content_encoded_and_default_freshness(self, face, recorder):
        face.add_response('/a', 'text')
        face.express_interest('/a', on_data=recorder)
        face.process_events()
        data = recorder.calls[0][1]
        assert data.content == b'text'
        assert data.freshness_period == 10000

    def test_prebuilt_data_kept_as_is(self, face, recorder):
        packet = Data(name=Name.from_str('/a'), content=b'x', freshness_period=1)
        face.add_response('/a', packet)
        face.express_interest('/a', on_data=recorder)
        face.process_events()
        assert recorder.calls[0][1] is packet

    def test_prebuilt_data_with_other_name_rejected(self, face):
        packet = Data(name=Name.from_str('/b'), content=b'x')
        with pytest.raises(ValueError, match='/b'):
            face.add_response('/a', packet)
        assert face.responses.lookup('/a') is None

    def test_remove_response(self, face, recorder):
        face.add_response('/a', b'A')
        face.remove_response('/a')
        face.remove_response('/a')
        face.express_interest('/a', on_data=recorder)
        face.process_events()
        assert recorder.calls == []
        assert face.last_outcome == DispatchOutcome.UNANSWERED


class TestHandlers:
    """Handlers registered on the face."""

    def test_ping_scenario(self, face, make_recorder):
        """Canned response first, then a handler on the parent prefix once it is removed."""
        on_data = make_recorder()
        face.add_response('/ndn/ping', b'R1')
        face.express_interest('/ndn/ping', on_data=on_data)
        face.process_events()
        assert content_of(on_data) == [b'R1']

        face.remove_response('/ndn/ping')
        handler = make_recorder()
        registration_id = face.register_prefix('/ndn', handler, child_inherit=True)
        face.express_interest('/ndn/ping')

        assert len(handler.calls) == 1
        prefix, interest, received_id = handler.calls[0]
        assert Name.to_str(prefix) == '/ndn'
        assert Name.to_str(interest.name) == '/ndn/ping'
        assert received_id == registration_id

    def test_handler_answers_with_put_data(self, face, recorder):
        def on_interest(prefix, interest, registered_prefix_id):
            face.put_data(interest.name, b'from handler', freshness_period=500)

        face.register_prefix('/app', on_interest)
        face.express_interest('/app/item/1', on_data=recorder)
        assert face.process_events() == 1
        data = recorder.calls[0][1]
        assert data.content == b'from handler'
        assert data.freshness_period == 500

    def test_route_decorator(self, face, recorder):
        @face.route('/app', child_inherit=False)
        def on_interest(prefix, interest, registered_prefix_id):
            face.put_data(interest.name, 'exact')

        face.express_interest('/app/deeper', on_data=recorder)
        face.express_interest('/app', on_data=recorder)
        face.process_events()
        assert content_of(recorder) == [b'exact']
        assert callable(on_interest)

    def test_exact_only_registration(self, face, recorder):
        face.register_prefix('/a/b', recorder, child_inherit=False)
        face.express_interest('/a/b/c')
        assert recorder.calls == []
        face.express_interest('/a/b')
        assert len(recorder.calls) == 1

    def test_tie_goes_to_earliest_registration(self, face, make_recorder):
        """With /a (ChildInherit) registered before /a/b (exact), /a/b goes to /a."""
        h1 = make_recorder()
        h2 = make_recorder()
        id1 = face.register_prefix('/a', h1, child_inherit=True)
        id2 = face.register_prefix('/a/b', h2, child_inherit=False)

        face.express_interest('/a/b')
        assert len(h1.calls) == 1
        assert h2.calls == []

        # each registration is reachable on its own
        face.remove_registered_prefix(id1)
        face.express_interest('/a/b')
        assert len(h2.calls) == 1
        assert h2.calls[0][2] == id2

        face.remove_registered_prefix(id2)
        id3 = face.register_prefix('/a', h1, child_inherit=True)
        face.express_interest('/a/b')
        assert len(h1.calls) == 2
        assert h1.calls[1][2] == id3

    def test_registered_ids_monotonic(self, face, recorder):
        first = face.register_prefix('/a', recorder)
        face.remove_registered_prefix(first)
        face.remove_registered_prefix(first)
        face.remove_registered_prefix(999)
        second = face.register_prefix('/a', recorder)
        assert second > first

    def test_raising_handler_leaves_nothing_pending(self, face, clock, recorder):
        """An Interest whose express_interest() raised never times out later."""
        def failing(prefix, interest, registered_prefix_id):
            raise RuntimeError("boom")

        face.register_prefix('/a', failing)
        with pytest.raises(RuntimeError, match="boom"):
            face.express_interest('/a', on_timeout=recorder)
        assert len(face.pending) == 0

        clock.advance(10)
        assert face.process_events() == 0
        assert recorder.calls == []

    def test_handler_can_unregister_itself(self, face, recorder):
        def once(prefix, interest, registered_prefix_id):
            recorder(prefix, interest, registered_prefix_id)
            face.remove_registered_prefix(registered_prefix_id)

        face.register_prefix('/once', once)
        face.express_interest('/once')
        face.express_interest('/once')
        assert len(recorder.calls) == 1


class TestPendingInterests:
    """Pending Interest bookkeeping, timeouts and removal."""

    def test_pending_ids_separate_from_registration_ids(self, face, recorder):
        registration_id = face.register_prefix('/a', recorder)
        first = face.express_interest('/z')
        second = face.express_interest('/z')
        assert first == 1 == registration_id
        assert second == 2

    def test_timeout_after_lifetime(self, face, clock, make_recorder):
        on_data = make_recorder()
        on_timeout = make_recorder()
        face.express_interest('/nobody', on_data=on_data, on_timeout=on_timeout, lifetime=1000)

        assert face.process_events() == 0
        clock.advance(0.5)
        assert face.process_events() == 0
        clock.advance(0.5)
        assert face.process_events() == 1
        assert on_data.calls == []
        assert Name.to_str(on_timeout.calls[0][0].name) == '/nobody'

        clock.advance(10)
        assert face.process_events() == 0

    def test_default_lifetime_from_config(self, face, clock, recorder):
        face.express_interest('/nobody', on_timeout=recorder)
        clock.advance(3.5)
        face.process_events()
        assert recorder.calls == []
        clock.advance(0.5)
        face.process_events()
        assert len(recorder.calls) == 1

    def test_satisfied_interest_does_not_time_out(self, face, clock, make_recorder):
        on_timeout = make_recorder()
        face.add_response('/a', b'A')
        face.express_interest('/a', on_timeout=on_timeout)
        face.process_events()
        clock.advance(100)
        face.process_events()
        assert on_timeout.calls == []
        assert len(face.pending) == 0

    def test_remove_pending_interest(self, face, clock, make_recorder):
        on_data = make_recorder()
        on_timeout = make_recorder()
        face.add_response('/a', b'A')
        pending_id = face.express_interest('/a', on_data=on_data, on_timeout=on_timeout)
        face.remove_pending_interest(pending_id)
        face.remove_pending_interest(pending_id)
        face.remove_pending_interest(424242)

        face.process_events()
        clock.advance(100)
        face.process_events()
        assert on_data.calls == []
        assert on_timeout.calls == []

    def test_can_be_prefix(self, face, make_recorder):
        exact = make_recorder()
        prefix = make_recorder()

        def on_interest(prefix_name, interest, registered_prefix_id):
            face.put_data('/data/v1', b'v1')

        face.register_prefix('/data', on_interest)
        face.express_interest('/data', on_data=exact)
        face.express_interest('/data', on_data=prefix, can_be_prefix=True)
        face.process_events()
        assert exact.calls == []
        assert content_of(prefix) == [b'v1']

    def test_interest_params_recorded(self, face, recorder):
        face.register_prefix('/a', recorder)
        face.express_interest('/a', lifetime=1234, must_be_fresh=True, app_param=b'p')
        interest = recorder.calls[0][1]
        assert interest.param.lifetime == 1234
        assert interest.param.must_be_fresh is True
        assert interest.app_param == b'p'
        assert face.transport.sent_interests == [interest]


class TestAsync:
    """Coroutine API mirroring NDNApp.express_interest."""

    def test_returns_data(self, face):
        face.add_response('/ndn/ping', b'pong')
        data = asyncio.run(face.express_interest_async('/ndn/ping'))
        assert data.content == b'pong'

    def test_handler_answer(self, face):
        @face.route('/echo')
        def echo(prefix, interest, registered_prefix_id):
            face.put_data(interest.name, interest.app_param)

        data = asyncio.run(face.express_interest_async('/echo/1', app_param=b'hello'))
        assert data.content == b'hello'

    def test_unanswered_raises_timeout(self, face):
        with pytest.raises(InterestTimeout):
            asyncio.run(face.express_interest_async('/nobody'))
        assert len(face.pending) == 0


class TestShutdown:
    """Face lifecycle."""

    def test_use_after_shutdown(self, face):
        face.shutdown()
        face.shutdown()
        with pytest.raises(FaceClosedError):
            face.express_interest('/a')
        with pytest.raises(FaceClosedError):
            face.put_data('/a', b'')
        with pytest.raises(FaceClosedError):
            face.process_events()

    def test_shutdown_drops_pending(self, face, recorder):
        face.express_interest('/a', on_timeout=recorder)
        face.shutdown()
        assert len(face.pending) == 0

    def test_independent_faces(self, config, clock, recorder):
        one = MockFace(config=config, clock=clock)
        two = MockFace(config=config, clock=clock)
        one.register_prefix('/a', recorder)
        one.register_prefix('/a', recorder)
        assert two.register_prefix('/a', recorder) == 1
        two.express_interest('/b')
        assert recorder.calls == []
