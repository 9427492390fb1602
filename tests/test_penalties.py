import pytest

from food_offences.errors import UnhandledOffsetError
from food_offences.ingestion.penalties import correct_imposed_penalties
from food_offences.models.record import FinalizedRecord


def make(offences, penalties):
    return FinalizedRecord(offence_proven=list(offences), imposed_penalties=list(penalties))


def test_trailing_total_is_dropped():
    records = correct_imposed_penalties([make(["a", "b"], ["$1", "$2", "$3"])])

    assert records[0].imposed_penalties == ["$1", "$2"]


def test_spilled_total_is_removed_from_next_record():
    records = [
        make(["a"], ["$1"]),
        make(["b"], ["$1", "$2", "$2"]),
    ]

    correct_imposed_penalties(records)

    assert records[0].imposed_penalties == ["$1"]
    assert records[1].imposed_penalties == ["$2"]


def test_spill_on_last_record_is_a_no_op():
    records = correct_imposed_penalties([make(["a"], ["$1"])])

    assert records[0].imposed_penalties == ["$1"]


@pytest.mark.parametrize("penalties", [[], ["$1", "$2", "$3"], ["$1", "$2", "$3", "$4"]])
def test_unknown_offsets_are_fatal(penalties):
    record = make(["a"], penalties)

    with pytest.raises(UnhandledOffsetError) as excinfo:
        correct_imposed_penalties([record])

    assert excinfo.value.offset == len(penalties) - 1
    assert excinfo.value.record is record


def test_every_corrected_record_is_aligned():
    records = [
        make(["a", "b"], ["$1", "$2", "$3"]),
        make(["c"], ["$4"]),
        make(["d", "e"], ["$9", "$5", "$6", "$11"]),
        make(["f"], ["$7", "$7"]),
    ]

    correct_imposed_penalties(records)

    assert all(len(r.imposed_penalties) == len(r.offence_proven) for r in records)
    assert [r.imposed_penalties for r in records] == [["$1", "$2"], ["$4"], ["$5", "$6"], ["$7"]]
