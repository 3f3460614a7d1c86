import json

import pytest

from capcalc.core.constants import DEFAULT_CONSTANTS
from capcalc.core.models import CalculationInputs
from capcalc.services.session import CalculatorSession
from capcalc.services.settings import SettingsManager


def test_creates_file_with_defaults(tmp_path):
    path = tmp_path / "settings.json"
    s = SettingsManager(path)
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == SettingsManager.DEFAULTS
    assert s.constants() == DEFAULT_CONSTANTS
    assert s.use_dimensions is False


def test_default_location_is_app_data_dir(tmp_path):
    s = SettingsManager()
    assert s.path.name == "settings.json"
    assert s.path.parent.name == "CapacityCalc"


def test_overrides_persist(tmp_path):
    path = tmp_path / "settings.json"
    s = SettingsManager(path)
    table = s.set_constant_overrides({"TIN_ROOF_KCAL_PER_PING": 800})
    assert table.TIN_ROOF_KCAL_PER_PING == 800
    assert SettingsManager(path).constants().TIN_ROOF_KCAL_PER_PING == 800


def test_bad_overrides_not_saved(tmp_path):
    path = tmp_path / "settings.json"
    s = SettingsManager(path)
    with pytest.raises(KeyError):
        s.set_constant_overrides({"NOPE": 1})
    assert s.get("constants") == {}


def test_broken_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    s = SettingsManager(path)
    assert s.get("constants") == {}
    assert s.constants() == DEFAULT_CONSTANTS


def test_invalid_stored_overrides_are_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"constants": {"WEST_SUN": "hot"}}), encoding="utf-8")
    assert SettingsManager(path).constants() == DEFAULT_CONSTANTS


def test_use_dimensions_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    SettingsManager(path).use_dimensions = True
    assert SettingsManager(path).use_dimensions is True


def test_saved_overrides_drive_recalculation(tmp_path):
    s = SettingsManager(tmp_path / "settings.json")
    session = CalculatorSession(CalculationInputs(area=4, is_tin_roof=True))
    assert session.results.total_kcal == 3750

    session.set_constants(s.set_constant_overrides({"TIN_ROOF_KCAL_PER_PING": 800}))
    assert session.results.total_kcal == 4000
    assert s.get("constants") == {"TIN_ROOF_KCAL_PER_PING": 800}
