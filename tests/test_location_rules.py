import threading

import pytest

from shared.core.config import settings
from inventory_service.app.services.location_rules import (
    bin_location,
    check_bin,
    check_rack,
    same_location,
)
from inventory_service.app.services.material_locks import MaterialLocks


class TestLocationVocabulary:
    @pytest.mark.parametrize("rack", ["A1", "a2", "C12", " B3 "])
    def test_valid_racks(self, rack):
        assert check_rack(rack) == rack.strip()

    @pytest.mark.parametrize("rack", ["", None, "1A", "AA", "A123", "A-1"])
    def test_invalid_racks(self, rack):
        with pytest.raises(ValueError):
            check_rack(rack)

    @pytest.mark.parametrize("bin_code", ["01", "84", "99"])
    def test_valid_bins(self, bin_code):
        assert check_bin(bin_code) == bin_code

    @pytest.mark.parametrize("bin_code", ["", None, "00", "1", "001", "A1"])
    def test_invalid_bins(self, bin_code):
        with pytest.raises(ValueError):
            check_bin(bin_code)

    def test_enumerated_vocabulary(self, monkeypatch):
        monkeypatch.setattr(settings, "ALLOWED_RACKS", "A1, A2")
        monkeypatch.setattr(settings, "ALLOWED_BINS", "01,02")

        assert check_rack("a2") == "a2"
        assert check_bin("02") == "02"
        with pytest.raises(ValueError):
            check_rack("B1")
        with pytest.raises(ValueError):
            check_bin("03")

    def test_same_location_ignores_case(self):
        assert same_location("a1", "01", "A1", "01")
        assert not same_location("A1", "01", "A1", "02")

    def test_bin_location(self):
        assert bin_location("A1", "01") == "A1-01"


class TestMaterialLocks:
    def test_same_code_is_serialized(self):
        locks = MaterialLocks()
        entered = threading.Event()
        release = threading.Event()
        order = []

        def first():
            with locks.hold("TRIM-001"):
                order.append("first-in")
                entered.set()
                release.wait(timeout=5)
                order.append("first-out")

        def second():
            entered.wait(timeout=5)
            with locks.hold("TRIM-001"):
                order.append("second-in")

        t1 = threading.Thread(target=first)
        t2 = threading.Thread(target=second)
        t1.start()
        t2.start()
        entered.wait(timeout=5)
        t2.join(timeout=0.2)
        assert order == ["first-in"]

        release.set()
        t1.join(timeout=5)
        t2.join(timeout=5)
        assert order == ["first-in", "first-out", "second-in"]

    def test_other_codes_do_not_wait(self):
        locks = MaterialLocks()
        with locks.hold("TRIM-001"):
            acquired = threading.Event()

            def other():
                with locks.hold("TRIM-002"):
                    acquired.set()

            worker = threading.Thread(target=other)
            worker.start()
            worker.join(timeout=5)
            assert acquired.is_set()
