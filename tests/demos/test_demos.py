"""
示例入口测试
"""

import io
from unittest.mock import patch

import pytest

from designpatterns.abstractdocument import Car
from designpatterns.abstractfactory import Application, MacButton, WinCheckbox
from designpatterns.core.exceptions import UnknownPlatformError, ConfigValidationError
from designpatterns.demos import abstract_document, abstract_factory


class TestAbstractDocumentDemo:

    def test_default_car(self):
        car = abstract_document.main([])

        assert isinstance(car, Car)
        assert car.get_model() == "Tesla Model S"
        assert car.get_price() == 79900
        assert car.get_color() == "red"

    def test_config_and_overrides(self, tmp_path):
        path = tmp_path / "demo.yaml"
        path.write_text("car:\n  model: Tesla Model 3\n", encoding="utf-8")

        car = abstract_document.main(["--config", str(path), "--override", "car.price=39990"])

        assert car.get_model() == "Tesla Model 3"
        assert car.get_price() == 39990

    def test_invalid_config(self, tmp_path):
        path = tmp_path / "demo.yaml"
        path.write_text("car: a string\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError):
            abstract_document.main(["--config", str(path)])


class TestAbstractFactoryDemo:

    def test_platform_argument(self):
        stream = io.StringIO()
        app = abstract_factory.main(["--platform", "mac"], stream=stream)

        assert isinstance(app, Application)
        assert isinstance(app.button, MacButton)
        assert stream.getvalue().splitlines() == [
            "Render a button in a Mac Style",
            "Render a checkbox in a Mac Style",
        ]

    def test_platform_from_config(self, tmp_path):
        path = tmp_path / "demo.yaml"
        path.write_text("platform: Windows\n", encoding="utf-8")
        stream = io.StringIO()

        app = abstract_factory.main(["--config", str(path)], stream=stream)

        assert isinstance(app.checkbox, WinCheckbox)
        assert "Windows Style" in stream.getvalue()

    def test_argument_wins_over_config(self, tmp_path):
        path = tmp_path / "demo.yaml"
        path.write_text("platform: windows\n", encoding="utf-8")
        stream = io.StringIO()

        abstract_factory.main(["--config", str(path), "--platform", "mac"], stream=stream)

        assert "Mac Style" in stream.getvalue()

    def test_host_platform_used_by_default(self, capsys):
        with patch.object(abstract_factory, "detect_platform_name", return_value="Windows"):
            abstract_factory.main([])

        assert capsys.readouterr().out.splitlines() == [
            "Render a button in a Windows Style",
            "Render a checkbox in a Windows Style",
        ]

    def test_unknown_platform_propagates(self):
        stream = io.StringIO()
        with patch.object(abstract_factory, "detect_platform_name", return_value="Linux"):
            with pytest.raises(UnknownPlatformError):
                abstract_factory.main([], stream=stream)

        assert stream.getvalue() == ""

    def test_resolve_platform_name(self):
        assert abstract_factory.resolve_platform_name("mac", {"platform": "windows"}) == "mac"
        assert abstract_factory.resolve_platform_name(None, {"platform": "windows"}) == "windows"
        with patch.object(abstract_factory, "detect_platform_name", return_value="Darwin"):
            assert abstract_factory.resolve_platform_name(None, {}) == "Darwin"
