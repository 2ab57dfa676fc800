import pytest

from gamma_mipmap.averager import DEFAULT_GAMMA
from gamma_mipmap.config import MipmapConfig


def test_defaults() -> None:
    config = MipmapConfig()
    config.validate()
    assert config.gamma == DEFAULT_GAMMA == 2.2
    assert config.output_dir is None
    assert config.fail_fast is False


@pytest.mark.parametrize("gamma", [0.0, -2.2, float("nan")])
def test_invalid_gamma(gamma) -> None:
    with pytest.raises(ValueError):
        MipmapConfig(gamma=gamma).validate()


def test_output_dir_must_not_be_a_file(tmp_path) -> None:
    blocker = tmp_path / "file.txt"
    blocker.write_text("x")
    with pytest.raises(ValueError):
        MipmapConfig(output_dir=blocker).validate()
