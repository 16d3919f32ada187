"""Tests for the WheelController façade: commands, finalization and auto-spin."""
import numpy as np
import pytest

from wheelpicker.model.spin import SpinPhase


def _names(items):
    return [item.name for item in items]


def test_spin_to_completion_records_a_winner(make_wheel, run_until_idle):
    wheel = make_wheel(("A", 1), ("B", 1), ("C", 1))
    assert wheel.can_spin()

    wheel.spin()
    assert wheel.is_spinning()
    assert not wheel.can_spin()

    finalized = run_until_idle(wheel)

    assert finalized == 1
    assert not wheel.is_spinning()
    assert wheel.phase() == SpinPhase.IDLE
    assert wheel.winner_history()[0] in {"A", "B", "C"}
    assert len(wheel.items()) == 3
    assert wheel.removed_items() == []


def test_remove_winner_moves_winner_aside(make_wheel, run_until_idle):
    wheel = make_wheel(("A", 1), ("B", 1), ("C", 1), remove_winner=True)

    wheel.spin()
    run_until_idle(wheel)

    winner = wheel.latest_winner()
    assert len(wheel.items()) == 2
    assert _names(wheel.removed_items()) == [winner]
    assert winner not in _names(wheel.items())


def test_auto_spin_chains_until_one_item_is_left(make_wheel, run_until_idle):
    wheel = make_wheel(("A", 1), ("B", 1), ("C", 1), remove_winner=True, auto_spin=True)

    wheel.spin()
    finalized = run_until_idle(wheel)

    assert finalized == 2
    assert len(wheel.items()) == 1
    assert len(wheel.winner_history()) == 2
    assert sorted(wheel.winner_history() + _names(wheel.items())) == ["A", "B", "C"]
    # Most recent first
    assert _names(wheel.removed_items()) == list(reversed(wheel.winner_history()))


def test_auto_spin_without_remove_winner_does_not_chain(make_wheel, run_until_idle):
    wheel = make_wheel(("A", 1), ("B", 1), ("C", 1), auto_spin=True)

    wheel.spin()

    assert run_until_idle(wheel) == 1
    assert len(wheel.items()) == 3


def test_history_is_most_recent_first(make_wheel, run_until_idle):
    wheel = make_wheel(("A", 1), ("B", 1))
    winners = []
    for _ in range(5):
        wheel.spin()
        run_until_idle(wheel)
        winners.insert(0, wheel.latest_winner())
    assert wheel.winner_history() == winners


def test_wheel_emptied_mid_spin_records_nothing(make_wheel):
    wheel = make_wheel(("A", 1), ("B", 1))
    wheel.spin()
    wheel.clear_all()

    results = []
    while wheel.is_spinning():
        results.append(wheel.tick(1.0))

    assert not any(results)
    assert wheel.winner_history() == []


def test_empirical_frequencies_follow_weights(make_wheel, run_until_idle):
    wheel = make_wheel(("light", 1), ("heavy", 3))
    n = 3000

    for _ in range(n):
        wheel.spin()
        run_until_idle(wheel)

    history = np.array(wheel.winner_history())
    frequency = np.mean(history == "heavy")
    assert frequency == pytest.approx(0.75, abs=0.05)


def test_add_item_uses_average_weight(make_wheel):
    wheel = make_wheel(("A", 1), ("B", 2), ("C", 4))
    assert wheel.add_item("  D  ")
    assert wheel.items()[-1].name == "D"
    assert wheel.items()[-1].weight == 2


def test_add_item_ignores_blank_names(make_wheel):
    wheel = make_wheel(("A", 1))
    assert wheel.add_item("   ") is False
    assert len(wheel.items()) == 1


def test_add_item_to_emptied_wheel_gets_weight_one(make_wheel):
    wheel = make_wheel(("A", 5), ("B", 9))
    wheel.remove_permanently(1)
    wheel.remove_permanently(0)

    wheel.add_item("C")

    assert wheel.items()[0].weight == 1
    assert wheel.probability(0) == pytest.approx(1.0)


def test_percent_labels_are_refreshed_after_structural_changes(make_wheel):
    wheel = make_wheel(("A", 1), ("B", 1))
    assert [wheel.percent_label(i) for i in range(2)] == ["50", "50"]

    wheel.add_item("C")
    assert [wheel.percent_label(i) for i in range(3)] == ["33", "33", "33"]

    wheel.remove_temporarily(0)
    assert [wheel.percent_label(i) for i in range(2)] == ["50", "50"]

    assert wheel.apply_percentage(0, "75")
    assert [wheel.percent_label(i) for i in range(2)] == ["75", "25"]

    wheel.restore_all_removed()
    assert len(wheel.items()) == 3
    assert wheel.percent_label(2) == "20"


def test_failed_percentage_keeps_weights(make_wheel):
    wheel = make_wheel(("A", 2), ("B", 3))
    assert wheel.apply_percentage(0, "lots") is False
    assert [i.weight for i in wheel.items()] == [2, 3]


def test_rename(make_wheel):
    wheel = make_wheel(("A", 1), ("B", 1))
    assert wheel.rename(1, "  Bee ")
    assert wheel.items()[1].name == "Bee"
    assert wheel.rename(1, "   ") is False
    assert wheel.items()[1].name == "Bee"


def test_remove_and_restore_keep_lists_disjoint(make_wheel):
    wheel = make_wheel(("A", 1), ("B", 2), ("C", 3))

    removed = wheel.remove_temporarily(1)
    assert removed.name == "B"
    assert _names(wheel.items()) == ["A", "C"]
    assert _names(wheel.removed_items()) == ["B"]

    assert wheel.restore_all_removed() == 1
    assert _names(wheel.items()) == ["A", "C", "B"]
    assert wheel.removed_items() == []
    assert wheel.items()[-1].weight == 2

    assert wheel.restore_all_removed() == 0


def test_remove_permanently_discards_item(make_wheel):
    wheel = make_wheel(("A", 1), ("B", 1))
    wheel.remove_permanently(0)
    assert _names(wheel.items()) == ["B"]
    assert wheel.removed_items() == []


def test_clear_all_and_clear_history(make_wheel, run_until_idle):
    wheel = make_wheel(("A", 1), ("B", 1), ("C", 1), remove_winner=True)
    wheel.spin()
    run_until_idle(wheel)

    wheel.clear_history()
    assert wheel.winner_history() == []
    assert len(wheel.removed_items()) == 1

    wheel.spin()
    run_until_idle(wheel)
    wheel.clear_all()
    assert wheel.items() == []
    assert wheel.winner_history() == []
    assert len(wheel.removed_items()) == 2
    assert wheel.total_weight() == 1
    assert not wheel.can_spin()


def test_flag_setters(make_wheel):
    wheel = make_wheel(("A", 1))
    wheel.set_remove_winner(True)
    wheel.set_auto_spin(True)
    assert wheel.data.remove_winner is True
    assert wheel.data.auto_spin is True


def test_single_item_cannot_spin(make_wheel):
    assert not make_wheel(("A", 1)).can_spin()
