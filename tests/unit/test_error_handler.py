from hugo_lastmod.models import ErrorCode, ErrorLevel, ProcessError
from hugo_lastmod.utils.error_handler import ErrorHandler


def test_error_handler_levels() -> None:
    handler = ErrorHandler()
    handler.add(ProcessError(code=ErrorCode.CACHE_RESET, level=ErrorLevel.INFO, message="reset"))
    handler.add_warning(ErrorCode.DESCRIPTOR_INVALID, "bad front matter", "content/a/index.md")
    handler.add_fatal(ErrorCode.WRITE_FAILED, "read-only")

    assert len(handler.get_by_level(ErrorLevel.INFO)) == 1
    assert len(handler.get_by_level(ErrorLevel.RECOVERABLE)) == 1
    assert len(handler.get_by_level(ErrorLevel.FATAL)) == 1
    assert handler.has_fatal() is True
    assert handler.to_dicts()[1]["file_path"] == "content/a/index.md"


def test_error_handler_without_fatal() -> None:
    handler = ErrorHandler()
    handler.add_info(ErrorCode.NO_BUNDLES, "nothing to do")

    assert handler.has_fatal() is False
