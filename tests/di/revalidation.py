"""Mock revalidation providers for testing."""

from dishka import Scope, provide

from forum.adapter.revalidation import RecordingPathRevalidator
from forum.domain.service import PathRevalidator
from forum.util.di.infrastructure.revalidation import RevalidationProvider


class MockRevalidationProvider(RevalidationProvider):
    """Mock revalidation provider recording paths instead of sending them."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_recording_revalidator(self) -> RecordingPathRevalidator:
        """Provide the recording revalidator, shared for assertions."""
        return RecordingPathRevalidator()

    @provide(scope=Scope.APP)
    def get_path_revalidator(
        self, recorder: RecordingPathRevalidator
    ) -> PathRevalidator:
        """Expose the recorder as the revalidation port."""
        return recorder
