"""Property-based tests for the serializer using Hypothesis."""

import copy

import yaml
from hypothesis import given, settings
from hypothesis import strategies as st
from yamlsort import BOOLEAN_WORDS, NAME_KEY, SerializeOptions, serialize

_scalars = st.one_of(
    st.none(),
    st.text(max_size=12),
    st.integers(),
    st.floats(allow_nan=False),
)


def generic_values():
    """Arbitrary trees of the supported value kinds."""
    return st.recursive(
        _scalars,
        lambda children: st.one_of(
            st.lists(children, max_size=4),
            st.dictionaries(st.text(min_size=1, max_size=8), children, max_size=4),
        ),
        max_leaves=20,
    )


def _word():
    """Letters-only text that YAML reads back as the same string."""
    return st.text(
        alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
        min_size=1,
        max_size=8,
    ).filter(lambda s: s.lower() not in BOOLEAN_WORDS | {"null"})


def plain_values():
    """Trees whose strings survive a YAML re-read, booleans words included."""
    leaves = st.one_of(
        st.none(),
        _word(),
        st.sampled_from(
            ["", "yes", "Off", "TRUE", "007", ",x", "1.5", "x\ny", "a\tb\n", "x\nb: y"]
        ),
        st.integers(),
        st.floats(allow_nan=False),
    )
    return st.recursive(
        leaves,
        lambda children: st.one_of(
            st.lists(children, max_size=4),
            st.dictionaries(_word(), children, max_size=4),
        ),
        max_leaves=20,
    )


class TestProperties:
    """Property-based tests for serializer invariants."""

    @given(value=generic_values())
    @settings(max_examples=100)
    def test_deterministic(self, value):
        """Serializing twice yields identical text."""
        assert serialize(value) == serialize(value)

    @given(value=generic_values())
    @settings(max_examples=100)
    def test_input_not_mutated(self, value):
        """The emitter never changes its input."""
        before = copy.deepcopy(value)
        serialize(value, SerializeOptions(always_quote_strings=True))
        assert value == before

    @given(value=generic_values())
    @settings(max_examples=100)
    def test_output_ends_with_newline(self, value):
        assert serialize(value).endswith("\n")

    @given(keys=st.sets(st.one_of(_word(), st.just(NAME_KEY)), min_size=1, max_size=8))
    @settings(max_examples=100)
    def test_key_order(self, keys):
        """'name' comes first, the rest ascend."""
        out = serialize({k: "v" for k in keys})
        rendered = [line.split(":", 1)[0] for line in out.splitlines()]
        rest = sorted(k for k in keys if k != NAME_KEY)
        expected = [NAME_KEY] + rest if NAME_KEY in keys else rest
        assert rendered == expected

    @given(value=plain_values())
    @settings(max_examples=200)
    def test_reparses_to_same_value(self, value):
        """Output read back by a YAML 1.1 parser equals the input."""
        assert yaml.safe_load(serialize(value)) == value

    @given(value=plain_values())
    @settings(max_examples=100)
    def test_always_quote_reparses(self, value):
        opts = SerializeOptions(always_quote_strings=True)
        assert yaml.safe_load(serialize(value, opts)) == value
