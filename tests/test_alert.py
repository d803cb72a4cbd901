from dockman.ui.alert import (
    alert_placeholder,
    error_alert,
    form_error,
    generic_error_alert,
    success_alert,
)
from dockman.ui.elements import tag


def test_placeholder_is_empty_alert_container():
    placeholder = alert_placeholder()
    assert placeholder.get("id") == "ui-alert"
    assert placeholder.children == []


def test_success_alert_structure():
    alert = success_alert(tag("p", "Saved"), tag("p", "All good"))
    assert alert.get("id") == "ui-alert"
    assert alert.get("role") == "alert"
    assert "border-green-500" in alert.get("class")
    assert alert.find_all("strong")[0].text_content() == "Saved"
    assert "All good" in alert.text_content()


def test_error_alert_without_message_shows_title_only():
    alert = error_alert(tag("p", "broken"))
    assert alert.find_all("strong") == []
    assert alert.text_content() == "broken"
    assert "border-red-500" in alert.get("class")


def test_error_alert_with_message():
    alert = error_alert("Failed", "details")
    assert alert.find_all("strong")[0].text_content() == "Failed"
    assert alert.text_content().endswith("details")


def test_generic_error_alert_contains_error_text():
    alert = generic_error_alert(ValueError("boom"))
    text = alert.text_content()
    assert "Unable to perform the operation" in text
    assert "boom" in text


def test_form_error_empty_has_no_alert():
    area = form_error("")
    assert area.get("id") == "form-error"
    assert area.find_all("strong") == []
    assert area.children == []


def test_form_error_with_message():
    area = form_error("passwords do not match")
    alerts = [div for div in area.find_all("div") if div.get("id") == "ui-alert"]
    assert len(alerts) == 1
    assert area.text_content() == "passwords do not match"