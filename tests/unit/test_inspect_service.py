from scrapview.core import config
from scrapview.inspect.classifier import RuleSet
from scrapview.services.inspect import active_rules, configured_rules

class TestRuleSelection:
    """Unit tests for choosing the classifier rule set from settings"""

    def test_full_and_legacy(self):
        """Test both known names are honoured"""
        config.settings.CLASSIFIER_RULES = "full"
        assert active_rules() == RuleSet.FULL
        config.settings.CLASSIFIER_RULES = "legacy"
        assert active_rules() == RuleSet.LEGACY

    def test_unknown_name_falls_back_to_full(self):
        """Test an unknown name is reported as unconfigured and runs the full rules"""
        config.settings.CLASSIFIER_RULES = "strictest"
        assert configured_rules() is None
        assert active_rules() == RuleSet.FULL

    def test_no_output_per_call(self, capsys):
        """Test the fallback itself stays quiet"""
        config.settings.CLASSIFIER_RULES = "strictest"
        active_rules()
        active_rules()
        assert capsys.readouterr().out == ""
