import pytest
from engine import GuessGameEngine
from models import Feedback

class FixedRng:
    def __init__(self, value): self.value = value
    def randint(self, a, b):
        # always the same secret
        return self.value

def test_engine_flow():
    eng = GuessGameEngine(rng=FixedRng(375))
    st = eng.start_session()
    assert st.target == 375
    assert eng.guess(st.session_id, 500)[0] is Feedback.TOO_HIGH
    assert eng.guess(st.session_id, 250)[0] is Feedback.TOO_LOW
    fb, rec = eng.guess(st.session_id, 375)
    assert fb is Feedback.CORRECT
    assert rec.guess_count == 3
    assert rec.finished is True

def test_correct_removes_session():
    eng = GuessGameEngine(rng=FixedRng(1))
    st = eng.start_session()
    eng.guess(st.session_id, 1)
    assert eng.get_state(st.session_id) is None
    with pytest.raises(LookupError):
        eng.guess(st.session_id, 1)

def test_reset_keeps_id_and_zeroes_count():
    eng = GuessGameEngine(rng=FixedRng(10))
    st = eng.start_session()
    eng.guess(st.session_id, 3)
    again = eng.reset_session(st.session_id)
    assert again.session_id == st.session_id
    assert again.guess_count == 0

def test_out_of_range_guess_is_rejected():
    eng = GuessGameEngine(rng=FixedRng(10))
    st = eng.start_session()
    with pytest.raises(ValueError):
        eng.guess(st.session_id, 1001)
    assert eng.get_state(st.session_id).guess_count == 0

def test_unknown_session():
    eng = GuessGameEngine()
    assert eng.get_state(None) is None
    with pytest.raises(LookupError):
        eng.guess("missing", 5)
