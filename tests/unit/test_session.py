from scrapview.schemas import Attempt
from scrapview.services.session import InspectionSession

def chain(*statuses):
    return [Attempt(url=f"https://example.com/{i}", response_status=s) for i, s in enumerate(statuses)]

class TestInspectionSession:
    """Unit tests for current-chain bookkeeping"""

    def test_begin_increments_generation(self):
        """Test every submission gets a new token"""
        s = InspectionSession()
        assert s.begin("https://a.test") == 1
        assert s.begin("https://b.test") == 2
        assert s.generation == 2

    def test_commit_latest(self):
        """Test the latest submission becomes current"""
        s = InspectionSession()
        token = s.begin("https://a.test")
        assert s.commit(token, "https://a.test", chain(301, 200)) is True

        current = s.current
        assert current.generation == token
        assert current.url == "https://a.test"
        assert isinstance(current.attempts, tuple)
        assert [a.response_status for a in current.attempts] == [301, 200]

    def test_stale_result_discarded(self):
        """Test an older fetch finishing late does not replace a newer one"""
        s = InspectionSession()
        old = s.begin("https://old.test")
        new = s.begin("https://new.test")

        assert s.commit(new, "https://new.test", chain(200)) is True
        assert s.commit(old, "https://old.test", chain(301, 200)) is False
        assert s.current.url == "https://new.test"

    def test_stale_result_before_newer_finishes(self):
        """Test an older fetch is dropped even if the newer one is still in flight"""
        s = InspectionSession()
        old = s.begin("https://old.test")
        s.begin("https://new.test")

        assert s.commit(old, "https://old.test", chain(200)) is False
        assert s.current is None

    def test_replaced_wholesale(self):
        """Test a new chain replaces the previous one completely"""
        s = InspectionSession()
        first = s.begin("https://a.test")
        s.commit(first, "https://a.test", chain(301, 301, 200))
        second = s.begin("https://b.test")
        s.commit(second, "https://b.test", chain(200))
        assert len(s.current.attempts) == 1

    def test_reset(self):
        """Test reset clears the current chain and the counter"""
        s = InspectionSession()
        token = s.begin("https://a.test")
        s.commit(token, "https://a.test", chain(200))
        s.reset()
        assert s.current is None
        assert s.generation == 0
