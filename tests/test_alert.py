import pytest

from dtlsproto.alert import Alert, AlertDescription, AlertLevel, ContentType
from dtlsproto.errors import BufferTooSmallError


def test_valid_alert_unmarshal():
    alert = Alert.unmarshal(bytes([0x02, 0x0A]))
    assert alert == Alert(AlertLevel.FATAL, AlertDescription.UNEXPECTED_MESSAGE)


def test_valid_alert_marshal_round_trip():
    data = bytes([0x02, 0x0A])
    assert Alert.unmarshal(data).marshal() == data


def test_invalid_alert_length():
    with pytest.raises(BufferTooSmallError):
        Alert.unmarshal(bytes([0x00]))


def test_alert_string():
    alert = Alert(AlertLevel.FATAL, AlertDescription.UNEXPECTED_MESSAGE)
    assert str(alert) == "Alert LevelFatal: UnexpectedMessage"


def test_alert_string_unknown_values():
    alert = Alert.unmarshal(bytes([0x07, 0xFE]))
    assert alert.level == 7
    assert str(alert) == "Alert Invalid alert level: Invalid alert description"


def test_description_labels():
    assert str(Alert(AlertLevel.WARNING, AlertDescription.CLOSE_NOTIFY)) == (
        "Alert LevelWarning: CloseNotify"
    )
    assert str(Alert.unmarshal(bytes([0x01, 48]))) == "Alert LevelWarning: UnknownCA"


def test_content_type():
    assert Alert(AlertLevel.WARNING, AlertDescription.CLOSE_NOTIFY).content_type is ContentType.ALERT