import pytest

from packer.parsing.line_parser import parse_line
from packer.planning.solvers.greedy import run_greedy
from packer.quality_metrics.core import compute_parcel_metrics


def test_parcel_metrics():
    parcel = parse_line("75 : (2,14.55,€74) (7,60.02,€74) (9,89.95,€78)")
    m = compute_parcel_metrics(parcel, run_greedy(parcel))
    assert m["Total Price"] == pytest.approx(148.0)
    assert m["Total Weight"] == pytest.approx(74.57)
    assert m["Utilization"] == pytest.approx(100.0 * 74.57 / 75)
    assert m["Selected Items"] == 2
    assert m["Total Items"] == 3
    assert m["Total Possible Price"] == pytest.approx(226.0)


def test_zero_capacity_and_no_items():
    parcel = parse_line("0 :")
    m = compute_parcel_metrics(parcel, run_greedy(parcel))
    assert m["Utilization"] == 0.0
    assert m["Selection Rate"] == 0.0
