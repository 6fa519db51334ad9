import logging
import math

from curie_temperature.utils import sort_readings, validate_reading

logger = logging.getLogger(__name__)

SENTINEL = -1

INVALID_NUMBER = "Invalid input. Please enter a number."


def parse_temperature(text):
    return int(text.strip())


def parse_capacitance(text):
    value = float(text.strip())
    if not math.isfinite(value):
        raise ValueError(f"capacitance must be finite, got {text!r}")
    return value


def ask(prompt, parse):
    """Prompt until `parse` accepts the answer."""
    while True:
        try:
            return parse(input(prompt))
        except ValueError:
            print(INVALID_NUMBER)


def input_readings(readings):
    print("\nEnter temperature (°C) and capacitance (pF). "
          f"Type {SENTINEL} for temperature to stop.")

    while True:
        temp = ask("Temperature (°C): ", parse_temperature)
        if temp == SENTINEL:
            break

        capacitance = ask("Capacitance (pF): ", parse_capacitance)

        try:
            reading = validate_reading(temp, capacitance)
        except ValueError as exc:
            print(exc)
            continue

        readings.append(reading)
        logger.debug("Stored reading %s", reading)

    return sort_readings(readings)
