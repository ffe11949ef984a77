"""Hypothesis strategies for property-based testing of safer types."""

from hypothesis import strategies as st
from safer import Err, Nothing, Ok, Some

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
])

# Anything that is not None, falsy values included
non_none_values = st.one_of(
    st.integers(),
    st.text(max_size=20),
    st.booleans(),
    st.floats(allow_nan=False),
    st.lists(st.integers(), max_size=5),
)

# -----------------------------------------------------------------------------
# Option / Result strategies
# -----------------------------------------------------------------------------

options = st.one_of(st.integers().map(Some), st.just(Nothing))

results = st.one_of(
    st.integers().map(Ok),
    st.text(max_size=20).map(Err),
)

# Functions used by the law tests: total, deterministic, and able to produce
# either variant so both branches of and_then are exercised.
int_functions = st.sampled_from([
    lambda x: x + 1,
    lambda x: x * 2,
    lambda x: -x,
    lambda x: x % 7,
])

option_functions = st.sampled_from([
    lambda x: Some(x + 1),
    lambda x: Some(x * 3),
    lambda x: Some(x) if x % 2 == 0 else Nothing,
    lambda _: Nothing,
])

result_functions = st.sampled_from([
    lambda x: Ok(x + 1),
    lambda x: Ok(x - 3),
    lambda x: Ok(x) if x >= 0 else Err('negative'),
    lambda _: Err('always'),
])

# -----------------------------------------------------------------------------
# Map strategies
# -----------------------------------------------------------------------------

map_keys = st.text(alphabet='abcdefghij', min_size=1, max_size=3)

seed_dicts = st.dictionaries(map_keys, st.integers(), max_size=10)

map_operations = st.lists(
    st.one_of(
        st.tuples(st.just('set'), map_keys, st.integers()),
        st.tuples(st.just('delete'), map_keys, st.none()),
        st.tuples(st.just('clear'), st.none(), st.none()),
    ),
    max_size=20,
)
