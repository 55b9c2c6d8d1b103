"""Unit tests for the focustimer_cli.focus re-export package."""


class TestFocusPackageReExports:
    def test_all_contains_expected_names(self):
        import focustimer_cli.focus as focus_pkg

        expected = {
            "FocusTimer",
            "SessionCompleted",
            "TechniqueCatalog",
            "Ticker",
            "TimerDisplay",
            "TimerSnapshot",
            "show_summary",
        }
        assert expected.issubset(set(focus_pkg.__all__))

    def test_re_exported_classes_are_same_as_source(self):
        from focustimer_cli.focus import FocusTimer as FocusPkgTimer
        from focustimer_cli.models.focus import FocusTimer as ModelTimer

        assert FocusPkgTimer is ModelTimer

    def test_ui_re_exports(self):
        from focustimer_cli.focus import TimerDisplay
        from focustimer_cli.models.focus.ui import TimerDisplay as ModelTimerDisplay

        assert TimerDisplay is ModelTimerDisplay
