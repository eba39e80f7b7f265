"""Quickstart example for xsdatetime.

Demonstrates parsing XML Schema dateTime strings, zone handling, the
lenient field rules and conversion to datetime.

Note: parse() never raises. Always check for None before using the result.
"""

from xsdatetime import DateTimeConversionError, is_valid_datetime_value, parse, parse_datetime

# Example 1: Basic parsing
print("=" * 50)
print("Example 1: Basic Parsing")
print("=" * 50)

value = parse("2005-11-14T02:16:38Z")
if is_valid_datetime_value(value):
    print(f"{value.year}-{value.month:02d}-{value.day:02d} "
          f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} ({value.zone.name})")
# Output: 2005-11-14 02:16:38 (UTC)

# Example 2: Zone offsets
print("\n" + "=" * 50)
print("Example 2: Zone Offsets")
print("=" * 50)

for text in ("2005-11-14T02:16:38-09:00", "2005-11-14T02:16:38+05:30", "2005-11-14T02:16:38"):
    value = parse(text)
    if value is not None:
        print(f"{text:28} -> offset {value.offset_minutes:+d} min, zone {value.zone.name}")
# Output:
# 2005-11-14T02:16:38-09:00    -> offset -540 min, zone GMT-09:00
# 2005-11-14T02:16:38+05:30    -> offset +330 min, zone GMT+05:30
# 2005-11-14T02:16:38          -> offset +0 min, zone UTC

# Example 3: Fractional seconds
print("\n" + "=" * 50)
print("Example 3: Fractional Seconds")
print("=" * 50)

for fraction in ("5", "12", "125"):
    value = parse(f"2005-11-14T02:16:38.{fraction}")
    if value is not None:
        print(f".{fraction:3} -> {value.millisecond} ms")
# Output:
# .5   -> 500 ms
# .12  -> 120 ms
# .125 -> 125 ms

# Example 4: Malformed input
print("\n" + "=" * 50)
print("Example 4: Malformed Input")
print("=" * 50)

for text in ("2005-11-14 02:16:38", "2005-11-14T02:16:38+0900", "", None):
    print(f"{text!r:28} -> {parse(text)}")
# Output: None for each

# Example 5: Conversion to datetime
print("\n" + "=" * 50)
print("Example 5: Conversion to datetime")
print("=" * 50)

print(parse_datetime("2005-11-14T02:16:38.125-09:00"))
# Output: 2005-11-14 02:16:38.125000-09:00

leap = parse("2005-12-31T23:59:60Z")
if leap is not None:
    print(f"parse() keeps second={leap.second}")
    try:
        leap.to_datetime()
    except DateTimeConversionError as e:
        print(e)
print(f"parse_datetime() -> {parse_datetime('2005-12-31T23:59:60Z')}")

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
