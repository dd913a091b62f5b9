import warnings
from pathlib import Path

import longmemory


def test_public_api():
    for name in longmemory.__all__:
        assert hasattr(longmemory, name), name
    assert isinstance(longmemory.__version__, str)


def test_top_level_functions_interoperate():
    x = longmemory.fi_gen(2048, 0.25, rng=31)
    d = longmemory.gph_estimate(x)
    residual = longmemory.fracdiff(x, d)
    assert residual.shape == x.shape
    assert abs(longmemory.gph_estimate(residual)) < abs(d)


def test_sources_have_no_invalid_escapes():
    for path in Path(longmemory.__file__).parent.rglob("*.py"):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            compile(path.read_text(encoding="utf-8"), str(path), "exec")
