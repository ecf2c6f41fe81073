"""
Tests for the Sphinx configuration in docs/conf.py.
"""

import runpy
from pathlib import Path


CONF = Path(__file__).resolve().parent.parent / "docs" / "conf.py"


class TestDocsConfig:

    def test_intersphinx_covers_runtime_stack_only(self):
        """Cross-references point at Python and numpy, the only runtime imports."""
        conf = runpy.run_path(str(CONF))
        assert set(conf["intersphinx_mapping"]) == {"python", "numpy"}

    def test_release_matches_package(self):
        import denselinalg
        conf = runpy.run_path(str(CONF))
        assert conf["release"] == denselinalg.__version__
