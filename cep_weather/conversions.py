# ABOUTME: Temperature unit conversions from Celsius.
# ABOUTME: Kelvin uses the integer offset 273 to keep the published API output stable.


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 1.8 + 32


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + 273
