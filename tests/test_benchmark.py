from __future__ import annotations

import logging

import pytest
from scripts import benchmark


def test_run_measures_every_variant_of_selected_checks(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO, logger="guardclauses.benchmark")

    results = benchmark.run(["must_not_be_null"], number=10)

    assert [(check, variant) for check, variant, _ in results] == [
        ("must_not_be_null", "baseline"),
        ("must_not_be_null", "parameter_name"),
    ]
    assert all(elapsed >= 0.0 for _, _, elapsed in results)
    records = [r for r in caplog.records if r.name == "guardclauses.benchmark"]
    assert len(records) == 2
    assert records[0].__dict__["iterations"] == 10


def test_every_variant_succeeds() -> None:
    for case in benchmark.CASES:
        for func in case.variants.values():
            func()


def test_main_runs_with_small_iteration_count() -> None:
    assert benchmark.main(["--check", "must_be_one_of", "--number", "5"]) == 0
