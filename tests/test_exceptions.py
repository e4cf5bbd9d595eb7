from core.exceptions import ApplicationException, InvalidConfigurationError


def test_application_exception_message_and_steps():
    error = ApplicationException("Something broke", resolution_steps=["Restart", "Retry"])
    assert str(error) == "Something broke"
    message = error.get_user_message()
    assert message.startswith("Something broke")
    assert "  1. Restart" in message
    assert "  2. Retry" in message


def test_application_exception_without_steps():
    error = ApplicationException("Plain")
    assert error.get_user_message() == "Plain"
    assert error.details == {}


def test_invalid_configuration_carries_field_and_value():
    error = InvalidConfigurationError(field="cell_size", value="-1", message="bad size")
    assert isinstance(error, ApplicationException)
    assert error.field == "cell_size"
    assert error.details == {"field": "cell_size", "value": "-1"}
    assert "Possible solutions" in error.get_user_message()


def test_invalid_configuration_steps_name_the_field():
    error = InvalidConfigurationError(field="background.cell_size", value="0")
    assert "Check 'background.cell_size' in config/*.yaml" in error.resolution_steps
    assert error.get_user_message().splitlines()[2] == "Possible solutions:"
