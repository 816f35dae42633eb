import io
import logging

import pytest

from analytic3d import Precision
from analytic3d.__main__ import build_parser, main, run_demo
from analytic3d.log import LOGGER_NAME, setup_logging
## unit tests for the analytic3d demo command line


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestDemo:

    @pytest.mark.parametrize("precision", list(Precision))
    def test_run_demo(self, precision):
        out = io.StringIO()
        run_demo(precision, out=out)
        text = out.getvalue()
        assert "Point1(7, 4, 3)" in text
        assert "| x = 1 - 1t\n| y = 2 + 1t\n| z = 0 + 3t" in text
        assert "Plane1: 5x - 6y + 4z + 2 = 0" in text
        assert "Plane2: 9x + 0y - 2z + 1 = 0" in text
        assert "Plane3: 1x + 1y + 3z + 1 = 0" in text
        assert "Point of intersection (between Plane1 and Line1): P(-4, 7, 15)" in text
        assert "Line of intersection (between Plane1 and Plane2):" in text
        assert "Distance (from Plane1 to Point): 2.85" in text
        assert "Angle (between Plane1 and Line2):" in text
        assert "Angle (between Plane1 and Plane3):" in text

    def test_main(self, capsys):
        assert main(["--precision", "d"]) == 0
        captured = capsys.readouterr()
        assert "P(-4, 7, 15)" in captured.out
        assert "Distance (from Plane1 to Point): 2.85" in captured.out

    def test_digits(self, capsys):
        assert main(["--digits", "4"]) == 0
        assert "Distance (from Plane1 to Point): 2.849" in capsys.readouterr().out

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.precision == "f"
        assert args.digits == 2
        assert args.log_level == "WARNING"
        assert args.log_file is None

    def test_bad_precision(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--precision", "q"])


class TestLogging:

    def test_setup_logging(self):
        logger = setup_logging(logging.DEBUG)
        assert logger.name == "analytic3d"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        setup_logging(logging.INFO)
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        path = tmp_path / "demo.log"
        assert main(["--log-level", "INFO", "--log-file", str(path)]) == 0
        for handler in logging.getLogger(LOGGER_NAME).handlers:
            handler.flush()
        assert "running demo in single precision" in path.read_text(encoding="utf-8")
