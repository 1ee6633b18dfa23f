from datetime import datetime

import pytest

from timever import config
from timever.version_string import InvalidVersionFormat, VersionString


def test_timestamp_factories_use_clock():
    assert VersionString.production_timestamp() == "Rel202001011200"
    assert VersionString.development_timestamp() == "Dev202001011200"
    assert isinstance(VersionString.production_timestamp(), VersionString)


def test_timestamp_factory_accepts_explicit_moment():
    moment = datetime(2014, 12, 4, 11, 11)
    assert VersionString.production_timestamp(moment) == "Rel201412041111"


@pytest.mark.parametrize(
    "value",
    ["Rel202001011200", "Dev202001011200", "sm_2014_12_04_11_11"],
)
def test_is_timestamp(value):
    assert VersionString(value).is_timestamp()


@pytest.mark.parametrize("value", ["1.2.3", "0.1.0", "Release1", "banana", ""])
def test_is_not_timestamp(value):
    assert not VersionString(value).is_timestamp()


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1.2.3", True),
        ("v2.0.0", True),
        ("0.1.0", False),
        ("1.2.3.dev4", False),
        ("1.2.3.pre1", False),
        ("Rel202001011200", True),
        ("Dev202001011200", False),
        ("sm_2020_01_01_00_00", True),
    ],
)
def test_is_production(value, expected):
    version = VersionString(value)
    assert version.is_production() is expected
    assert version.is_development() is not expected


def test_invalid_version_fails_only_when_classified():
    version = VersionString("not-a-version")
    assert version == "not-a-version"
    assert not version.is_timestamp()
    with pytest.raises(InvalidVersionFormat):
        version.is_production()
    with pytest.raises(InvalidVersionFormat):
        version.validate()


def test_validate_returns_self():
    version = VersionString("1.0.0")
    assert version.validate() is version


def test_prefixes_follow_settings(monkeypatch):
    monkeypatch.setattr(
        config, "CONFIG", config.Settings(PRODUCTION_PREFIX="R", DEVELOPMENT_PREFIX="D")
    )
    assert VersionString.production_timestamp() == "R202001011200"
    assert VersionString("D202001011200").is_timestamp()
    assert not VersionString("Rel202001011200").is_timestamp()


def test_timestamp_format_with_separators(monkeypatch):
    monkeypatch.setattr(config, "CONFIG", config.Settings(TIMESTAMP_FORMAT="%Y_%m_%d_%H_%M"))
    version = VersionString.development_timestamp()
    assert version == "Dev2020_01_01_12_00"
    assert version.is_timestamp()
    assert version.is_development()
    assert VersionString("Rel2020_01_01_12_00").is_production()
    assert not VersionString("Rel202001011200").is_timestamp()


def test_prefix_with_unparsable_stamp_is_not_timestamp():
    assert not VersionString("Rel2020-01-01").is_timestamp()
    with pytest.raises(InvalidVersionFormat):
        VersionString("Dev2020xx").is_production()
