import pytest

from configs import BatchSettings, Config
from antfarm import PathLimits


def test_defaults_match_search_ceilings():
    assert Config().limits() == PathLimits(
        max_rooms_per_path=15,
        max_total_paths=100,
        max_path_combination=20,
        max_direct_paths=3,
        max_paths_in_combination=20,
    )


def test_env_overrides_are_coerced(monkeypatch):
    monkeypatch.setenv("ANTFARM_MAX_TOTAL_PATHS", "7")
    monkeypatch.setenv("ANTFARM_SAVE_ARTIFACTS", "yes")
    monkeypatch.setenv("ANTFARM_RUN_NAME", "nightly")
    config = Config().update_from_env()
    assert config.max_total_paths == 7
    assert config.save_artifacts is True
    assert config.run_name == "nightly"
    assert config.label() == "nightly"


def test_unparseable_env_value(monkeypatch):
    monkeypatch.setenv("ANTFARM_MAX_DIRECT_PATHS", "three")
    with pytest.raises(ValueError, match="ANTFARM_MAX_DIRECT_PATHS"):
        Config().update_from_env()


def test_validate_rejects_bad_settings():
    with pytest.raises(ValueError, match="max_rooms_per_path"):
        Config(max_rooms_per_path=0).validate()
    with pytest.raises(ValueError, match="Unknown algorithm"):
        Config(algorithm="annealing").validate()


def test_batch_settings_grid():
    settings = BatchSettings(farm_paths=["farms/a.txt", "farms/b.txt"], max_path_combinations=[5, 10])
    configs = list(settings.iter_configs())
    assert [config.label() for config in configs] == ["a_auto_C5", "a_auto_C10", "b_auto_C5", "b_auto_C10"]
    assert all(config.save_artifacts for config in configs)
    assert configs[1].output_dir.endswith("a_auto_C10")
