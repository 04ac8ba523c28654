"""Unit tests for ResumeChatController.

Uses StubGateway so session ids are predictable (s1, s2, ...).
"""

import asyncio

import pytest
import pytest_check as check

from src.client import ClientConfig, QueryError, QueryFailure, UploadError, UploadFailure
from src.controller import FALLBACK_ANSWER, SEED_SUFFIX, ResumeChatController
from src.models import ResumeDocument, Role, SessionStatus, Turn
from tests.stub_gateway import SUMMARY, StubGateway


@pytest.fixture
def controller(stub_gateway: StubGateway, client_config: ClientConfig) -> ResumeChatController:
    return ResumeChatController(stub_gateway, client_config)


def seed_turn(summary: str = SUMMARY) -> Turn:
    return Turn(role=Role.ASSISTANT, text=f"{summary}{SEED_SUFFIX}")


class TestUpload:
    """Tests for session creation through upload."""

    async def test_successful_upload_activates_session_and_seeds_log(
        self, controller: ResumeChatController, sample_resume: ResumeDocument
    ) -> None:
        error = await controller.upload(sample_resume)

        check.is_none(error)
        check.equal(controller.session.status, SessionStatus.ACTIVE)
        check.equal(controller.session.id, "s1")
        check.equal(controller.turns, (seed_turn(),))

    async def test_seed_text_has_invitation_suffix(
        self,
        controller: ResumeChatController,
        stub_gateway: StubGateway,
        sample_resume: ResumeDocument,
    ) -> None:
        stub_gateway.summary = "Experienced engineer..."

        await controller.upload(sample_resume)

        assert controller.turns[0].text == "Experienced engineer...\n\nWhat would you like to know?"

    async def test_failed_upload_returns_error_and_keeps_no_session(
        self,
        controller: ResumeChatController,
        stub_gateway: StubGateway,
        sample_resume: ResumeDocument,
    ) -> None:
        stub_gateway.upload_error = UploadError(UploadFailure.INVALID_TYPE, "Invalid file.")

        error = await controller.upload(sample_resume)

        check.is_not_none(error)
        check.equal(error.reason, UploadFailure.INVALID_TYPE)
        check.equal(error.message, "Invalid file.")
        check.equal(controller.session.status, SessionStatus.NONE)
        check.equal(controller.turns, ())
        check.is_false(controller.is_uploading)

    async def test_retry_after_failed_upload(
        self,
        controller: ResumeChatController,
        stub_gateway: StubGateway,
        sample_resume: ResumeDocument,
    ) -> None:
        stub_gateway.upload_error = UploadError(UploadFailure.NETWORK, "offline")
        await controller.upload(sample_resume)
        stub_gateway.upload_error = None

        error = await controller.upload(sample_resume)

        assert error is None
        assert controller.session.is_active

    async def test_missing_or_empty_document_is_noop(
        self, controller: ResumeChatController, stub_gateway: StubGateway
    ) -> None:
        assert await controller.upload(None) is None
        assert await controller.upload(ResumeDocument(filename="empty.pdf", content=b"")) is None

        assert stub_gateway.uploads == []
        assert controller.session.status is SessionStatus.NONE

    async def test_new_upload_supersedes_active_session(
        self, controller: ResumeChatController, sample_resume: ResumeDocument
    ) -> None:
        await controller.upload(sample_resume)
        await controller.ask("q1")

        await controller.upload(sample_resume)

        assert controller.session.id == "s2"
        assert controller.turns == (seed_turn(),)

    async def test_uploading_flag_and_concurrent_upload_ignored(
        self,
        controller: ResumeChatController,
        stub_gateway: StubGateway,
        sample_resume: ResumeDocument,
    ) -> None:
        stub_gateway.hold_uploads = True
        flags: list[bool] = []
        controller.subscribe(lambda: flags.append(controller.is_uploading))

        first = asyncio.create_task(controller.upload(sample_resume))
        await asyncio.sleep(0)
        second = await controller.upload(sample_resume)
        stub_gateway.release.set()
        await first

        assert second is None
        assert stub_gateway.uploads == ["resume.pdf"]
        assert flags[0] is True
        assert controller.is_uploading is False


class TestAsk:
    """Tests for the controller's question loop."""

    async def test_ask_before_upload_is_noop(
        self, controller: ResumeChatController, stub_gateway: StubGateway
    ) -> None:
        assert controller.can_ask("q") is False
        assert await controller.ask("q") is False
        assert controller.turns == ()
        assert stub_gateway.queries == []

    async def test_ordering_across_questions(
        self, controller: ResumeChatController, sample_resume: ResumeDocument
    ) -> None:
        await controller.upload(sample_resume)

        for question in ("q1", "q2"):
            await controller.ask(question)

        assert controller.turns == (
            seed_turn(),
            Turn(role=Role.USER, text="q1"),
            Turn(role=Role.ASSISTANT, text="Answer to: q1"),
            Turn(role=Role.USER, text="q2"),
            Turn(role=Role.ASSISTANT, text="Answer to: q2"),
        )

    async def test_network_failure_keeps_session_active(
        self,
        controller: ResumeChatController,
        stub_gateway: StubGateway,
        sample_resume: ResumeDocument,
    ) -> None:
        await controller.upload(sample_resume)
        stub_gateway.query_error = QueryError(QueryFailure.NETWORK, "Connection failed")

        await controller.ask("Q")

        assert controller.turns[-2:] == (
            Turn(role=Role.USER, text="Q"),
            Turn(role=Role.ASSISTANT, text=FALLBACK_ANSWER),
        )
        assert controller.session.is_active

    async def test_double_submit_is_noop(
        self,
        controller: ResumeChatController,
        stub_gateway: StubGateway,
        sample_resume: ResumeDocument,
    ) -> None:
        await controller.upload(sample_resume)
        stub_gateway.hold = True
        task = asyncio.create_task(controller.ask("q1"))
        await asyncio.sleep(0)
        length = len(controller.turns)

        assert controller.is_pending is True
        assert await controller.ask("q2") is False
        assert len(controller.turns) == length

        stub_gateway.release.set()
        await task
        assert controller.is_pending is False


class TestReset:
    """Tests for the 'New Resume' lifecycle."""

    async def test_reset_clears_log_and_session(
        self, controller: ResumeChatController, sample_resume: ResumeDocument
    ) -> None:
        await controller.upload(sample_resume)
        await controller.ask("q1")

        controller.reset()

        assert controller.turns == ()
        assert controller.session.status is SessionStatus.NONE
        assert await controller.ask("q2") is False
        assert controller.turns == ()

    async def test_stale_answer_not_added_to_new_session(
        self,
        controller: ResumeChatController,
        stub_gateway: StubGateway,
        sample_resume: ResumeDocument,
    ) -> None:
        await controller.upload(sample_resume)
        stub_gateway.hold = True
        task = asyncio.create_task(controller.ask("old question"))
        await asyncio.sleep(0)

        controller.reset()
        await controller.upload(sample_resume)
        stub_gateway.release.set()
        await task

        assert controller.session.id == "s2"
        assert controller.turns == (seed_turn(),)

    async def test_new_resume_releases_previous_session(
        self,
        controller: ResumeChatController,
        stub_gateway: StubGateway,
        sample_resume: ResumeDocument,
    ) -> None:
        await controller.upload(sample_resume)

        await controller.new_resume()

        assert stub_gateway.cleared == ["s1"]
        assert controller.session.status is SessionStatus.NONE
        assert controller.turns == ()

    async def test_new_resume_without_session_releases_nothing(
        self, controller: ResumeChatController, stub_gateway: StubGateway
    ) -> None:
        await controller.new_resume()

        assert stub_gateway.cleared == []

    async def test_release_can_be_disabled(
        self, stub_gateway: StubGateway, client_config: ClientConfig, sample_resume: ResumeDocument
    ) -> None:
        config = client_config.model_copy(update={"release_session_on_reset": False})
        controller = ResumeChatController(stub_gateway, config)
        await controller.upload(sample_resume)

        await controller.new_resume()

        assert stub_gateway.cleared == []
        assert controller.session.status is SessionStatus.NONE


class TestSuggestionsAndListeners:
    """Tests for suggestions and change notifications."""

    async def test_suggestions_survive_reset(
        self,
        controller: ResumeChatController,
        stub_gateway: StubGateway,
        sample_resume: ResumeDocument,
    ) -> None:
        await controller.load_suggestions()
        await controller.upload(sample_resume)

        controller.reset()

        assert controller.suggestions == stub_gateway.suggestions

    async def test_listener_fires_on_state_changes(
        self, controller: ResumeChatController, sample_resume: ResumeDocument
    ) -> None:
        calls: list[int] = []
        unsubscribe = controller.subscribe(lambda: calls.append(len(controller.turns)))

        await controller.upload(sample_resume)
        fired_after_upload = len(calls)
        await controller.ask("q1")

        assert fired_after_upload > 0
        assert calls[-1] == 3

        unsubscribe()
        controller.reset()
        assert calls[-1] == 3
