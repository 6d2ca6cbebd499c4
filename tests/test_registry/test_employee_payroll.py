"""Tests for EmployeePayroll."""

from __future__ import annotations

import pytest

from payroll.models.employee import EvalScore, NewEmployee
from payroll.registry import EmployeePayroll


class TestHire:
    def test_first_uid_is_zero(self, empty_payroll, ann_lee):
        emp = empty_payroll.hire(ann_lee)
        assert emp.uid == 0
        assert empty_payroll.next_uid == 1

    def test_hire_grows_size_and_is_findable(self, empty_payroll, ann_lee):
        emp = empty_payroll.hire(ann_lee)
        assert empty_payroll.size() == 1
        assert len(empty_payroll) == 1

        found = empty_payroll.find_by_uid(emp.uid)
        assert found is not None
        assert found.first_name == "Ann"
        assert found.last_name == "Lee"
        assert found.age == 30
        assert found.department == "Eng"
        assert found.supervisor == "Bob"
        assert found.position == "Dev"
        assert found.salary == 50000.0
        assert found.evaluation is EvalScore.AVERAGE

    def test_hire_with_keyword_fields(self, empty_payroll):
        emp = empty_payroll.hire(first_name="Kim", last_name="Cho", age=22)
        assert emp.uid == 0
        assert emp.salary == 0.0
        assert emp.department == ""

    def test_hire_rejects_both_forms(self, empty_payroll, ann_lee):
        with pytest.raises(TypeError):
            empty_payroll.hire(ann_lee, first_name="X")

    def test_duplicates_allowed(self, empty_payroll, ann_lee):
        a = empty_payroll.hire(ann_lee)
        b = empty_payroll.hire(ann_lee)
        assert a.uid != b.uid
        assert empty_payroll.size() == 2

    def test_uids_increase_and_never_repeat(self, empty_payroll, ann_lee):
        issued = []
        for round_ in range(4):
            emp = empty_payroll.hire(ann_lee)
            issued.append(emp.uid)
            if round_ % 2 == 0:
                empty_payroll.fire(emp.uid)
        issued.append(empty_payroll.hire(ann_lee).uid)

        assert issued == sorted(issued)
        assert len(set(issued)) == len(issued)
        assert issued == [0, 1, 2, 3, 4]

    def test_uid_not_reused_after_firing_last(self, empty_payroll, ann_lee):
        emp = empty_payroll.hire(ann_lee)
        empty_payroll.fire(emp.uid)
        assert empty_payroll.hire(ann_lee).uid == 1


class TestFire:
    def test_fire_existing(self, staffed_payroll):
        assert staffed_payroll.fire(1) is True
        assert staffed_payroll.size() == 2
        assert staffed_payroll.find_by_uid(1) is None
        assert [e.uid for e in staffed_payroll.list_all()] == [0, 2]

    def test_fire_missing_is_noop(self, staffed_payroll):
        before = [e.model_dump() for e in staffed_payroll.list_all()]
        assert staffed_payroll.fire(99) is False
        assert staffed_payroll.size() == 3
        assert [e.model_dump() for e in staffed_payroll.list_all()] == before

    def test_fire_twice(self, staffed_payroll):
        staffed_payroll.fire(0)
        assert staffed_payroll.fire(0) is False
        assert staffed_payroll.size() == 2

    def test_fire_on_empty(self, empty_payroll):
        assert empty_payroll.fire(0) is False
        assert empty_payroll.size() == 0


class TestGiveRaise:
    def test_raise_by_uid(self, staffed_payroll):
        staffed_payroll.give_raise(1, 1500.0)
        assert staffed_payroll.find_by_uid(1).salary == 81500.0

    def test_negative_raise(self, staffed_payroll):
        staffed_payroll.give_raise(0, -2000.0)
        assert staffed_payroll.find_by_uid(0).salary == 48000.0

    def test_raise_missing_uid_is_noop(self, staffed_payroll):
        staffed_payroll.give_raise(42, 100.0)
        assert staffed_payroll.calculate_payroll() == 170000.0

    def test_raise_by_name_affects_first_hired_only(self, empty_payroll, ann_lee):
        first = empty_payroll.hire(ann_lee)
        second = empty_payroll.hire(ann_lee)

        empty_payroll.give_raise_by_name("Ann", "Lee", 100.0)

        assert empty_payroll.find_by_uid(first.uid).salary == 50100.0
        assert empty_payroll.find_by_uid(second.uid).salary == 50000.0

    def test_raise_by_name_after_first_fired(self, empty_payroll, ann_lee):
        first = empty_payroll.hire(ann_lee)
        second = empty_payroll.hire(ann_lee)
        empty_payroll.fire(first.uid)

        empty_payroll.give_raise_by_name("Ann", "Lee", 100.0)

        assert empty_payroll.find_by_uid(second.uid).salary == 50100.0

    def test_raise_by_name_is_case_sensitive(self, staffed_payroll):
        staffed_payroll.give_raise_by_name("ann", "lee", 100.0)
        assert staffed_payroll.find_by_uid(0).salary == 50000.0

    def test_raise_by_name_requires_both_names(self, staffed_payroll):
        staffed_payroll.give_raise_by_name("Ann", "Li", 100.0)
        assert staffed_payroll.calculate_payroll() == 170000.0


class TestSetEvaluation:
    def test_set_evaluation(self, staffed_payroll):
        staffed_payroll.set_evaluation(2, EvalScore.SUPERB)
        assert staffed_payroll.find_by_uid(2).evaluation is EvalScore.SUPERB
        assert staffed_payroll.find_by_uid(0).evaluation is EvalScore.AVERAGE

    def test_set_evaluation_missing_is_noop(self, staffed_payroll):
        staffed_payroll.set_evaluation(9, EvalScore.UNSATISFACTORY)
        assert all(e.evaluation is EvalScore.AVERAGE for e in staffed_payroll)


class TestCalculatePayroll:
    def test_empty(self, empty_payroll):
        assert empty_payroll.calculate_payroll() == 0.0

    def test_sum(self, staffed_payroll):
        assert staffed_payroll.calculate_payroll() == 170000.0

    def test_scenario(self, empty_payroll, ann_lee, sam_li):
        assert empty_payroll.hire(ann_lee).uid == 0
        assert empty_payroll.hire(sam_li).uid == 1
        assert empty_payroll.calculate_payroll() == pytest.approx(130000.00)

        empty_payroll.fire(0)

        assert empty_payroll.calculate_payroll() == pytest.approx(80000.00)
        assert empty_payroll.find_by_uid(0) is None


class TestQueries:
    def test_find_by_uid_missing(self, staffed_payroll):
        assert staffed_payroll.find_by_uid(7) is None

    def test_find_by_uid_aliases_live_record(self, staffed_payroll):
        emp = staffed_payroll.find_by_uid(0)
        staffed_payroll.give_raise(0, 10.0)
        assert emp.salary == 50010.0

    def test_find_all_by_name_insertion_order(self, staffed_payroll, ann_lee):
        staffed_payroll.hire(ann_lee)
        matches = staffed_payroll.find_all_by_name("Ann", "Lee")
        assert [e.uid for e in matches] == [0, 3]

    def test_find_all_by_name_none(self, staffed_payroll):
        assert staffed_payroll.find_all_by_name("No", "Body") == []

    def test_find_by_department(self, staffed_payroll):
        assert [e.uid for e in staffed_payroll.find_by_department("Eng")] == [0, 1]
        assert [e.uid for e in staffed_payroll.find_by_department("Sales")] == [2]

    def test_find_by_department_exact_match(self, staffed_payroll):
        assert staffed_payroll.find_by_department("eng") == []
        assert staffed_payroll.find_by_department("") == []

    def test_list_all_order(self, staffed_payroll):
        assert [e.first_name for e in staffed_payroll.list_all()] == ["Ann", "Sam", "Joe"]

    def test_list_all_returns_fresh_list(self, staffed_payroll):
        listing = staffed_payroll.list_all()
        listing.clear()
        assert staffed_payroll.size() == 3

    def test_iteration_matches_list_all(self, staffed_payroll):
        assert list(staffed_payroll) == staffed_payroll.list_all()

    def test_size_tracks_live_records_not_hires(self, staffed_payroll):
        staffed_payroll.fire(0)
        staffed_payroll.fire(2)
        assert staffed_payroll.size() == 1
        assert staffed_payroll.next_uid == 3


class TestLogging:
    def test_hire_and_miss_logged_at_debug(self, empty_payroll, caplog):
        caplog.set_level("DEBUG", logger="payroll.registry")
        empty_payroll.hire(NewEmployee(first_name="Ann", last_name="Lee", age=30))
        empty_payroll.fire(5)
        messages = [r.getMessage() for r in caplog.records]
        assert "Hired Ann Lee as uid 0" in messages
        assert "Fire: no employee with uid 5" in messages


def test_new_registry_is_empty():
    payroll = EmployeePayroll()
    assert payroll.size() == 0
    assert payroll.list_all() == []
