from __future__ import annotations

import pytest

from lucky_greeter.application.use_cases.greet import GreetingResult, create_greet
from lucky_greeter.domain import FeatureFlags, LuckyRange


def test_greet_without_features_prints_hello_world(recorder, sequence_source) -> None:
    source = sequence_source([])
    greet = create_greet(features=FeatureFlags(), random_source=source, output=recorder)

    result = greet()

    assert recorder.lines == ["Hello, world!"]
    assert result == GreetingResult("Hello, world!")
    assert source.calls == []


def test_greet_with_print_alt_prints_forty_two(recorder, sequence_source) -> None:
    greet = create_greet(features=FeatureFlags(print_alt=True), random_source=sequence_source([]), output=recorder)

    greet()

    assert recorder.lines == ["42"]


def test_greet_with_random_appends_lucky_line(recorder, sequence_source) -> None:
    source = sequence_source([73])
    greet = create_greet(features=FeatureFlags(enable_random=True), random_source=source, output=recorder)

    result = greet()

    assert recorder.lines == ["Hello, world!", "Your lucky number: 73"]
    assert result.lucky_number == 73
    assert result.lines == tuple(recorder.lines)
    assert source.calls == [(1, 100)]


def test_greet_with_both_features(recorder, sequence_source) -> None:
    greet = create_greet(
        features=FeatureFlags(print_alt=True, enable_random=True),
        random_source=sequence_source([1]),
        output=recorder,
    )

    greet()

    assert recorder.lines == ["42", "Your lucky number: 1"]


def test_every_draw_over_a_hundred_runs_stays_in_range(recorder, sequence_source) -> None:
    values = list(range(1, 101))
    source = sequence_source(values)
    greet = create_greet(features=FeatureFlags(enable_random=True), random_source=source, output=recorder)

    numbers = [greet().lucky_number for _ in values]

    assert numbers == values
    assert all(1 <= number <= 100 for number in numbers)
    assert len(source.calls) == 100


@pytest.mark.parametrize("bad", [0, 101, -5])
def test_out_of_range_draw_is_refused_before_printing(recorder, sequence_source, bad: int) -> None:
    greet = create_greet(features=FeatureFlags(enable_random=True), random_source=sequence_source([bad]), output=recorder)

    with pytest.raises(ValueError, match="outside"):
        greet()

    assert recorder.lines == ["Hello, world!"]


def test_custom_range_is_forwarded_to_the_source(recorder, sequence_source) -> None:
    source = sequence_source([5])
    greet = create_greet(
        features=FeatureFlags(enable_random=True),
        random_source=source,
        output=recorder,
        lucky_range=LuckyRange(5, 6),
    )

    greet()

    assert source.calls == [(5, 6)]
    assert recorder.lines[-1] == "Your lucky number: 5"
