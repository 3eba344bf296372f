from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from filter_commons.dependencies import service_provider
from filter_commons.services.filter_controller_service import FilterControllerService


@pytest.fixture(autouse=True)
def reset_codec(monkeypatch):
    monkeypatch.setattr(service_provider, "__value_codec", None)


def test_timezone_from_env(monkeypatch):
    monkeypatch.setenv("FILTER_LOCAL_TIMEZONE", "Asia/Kolkata")
    assert service_provider.get_local_timezone() == ZoneInfo("Asia/Kolkata")


def test_system_timezone_when_unset(monkeypatch):
    monkeypatch.delenv("FILTER_LOCAL_TIMEZONE", raising=False)
    assert service_provider.get_local_timezone() is None


def test_invalid_timezone(monkeypatch):
    monkeypatch.setenv("FILTER_LOCAL_TIMEZONE", "Mars/Olympus_Mons")
    with pytest.raises(ZoneInfoNotFoundError):
        service_provider.get_local_timezone()


def test_codec_is_singleton(monkeypatch):
    monkeypatch.setenv("FILTER_LOCAL_TIMEZONE", "UTC")
    codec = service_provider.get_value_codec()
    assert codec is service_provider.get_value_codec()
    assert codec.tz == ZoneInfo("UTC")


def test_controller_uses_shared_codec(metadata):
    controller = service_provider.get_filter_controller(metadata)
    assert isinstance(controller, FilterControllerService)
    assert controller.codec is service_provider.get_value_codec()
    assert controller.metadata is metadata
