"""
Hypothesis strategies for aws-logger property-based testing.

These strategies generate log calls as a host framework would issue them.
"""

from hypothesis import strategies as st

# =============================================================================
# Log call strategies
# =============================================================================

# Framework severity levels, in any case
log_levels = st.sampled_from(
    ["emergency", "alert", "critical", "error", "warning", "notice", "info", "debug"]
).flatmap(lambda level: st.sampled_from([level, level.upper(), level.capitalize()]))

# Placeholder names the interpolation recognizes
context_keys = st.from_regex(r"[a-z][a-z0-9_]{0,11}", fullmatch=True)

# Scalar context values
context_values = st.one_of(
    st.integers(min_value=-10**6, max_value=10**6),
    st.text(alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="{}\n"), max_size=30),
)

# Message text without braces or newlines
plain_text = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="{}\\\n\t"),
    max_size=200,
)

# Field separators
separators = st.sampled_from(["\t", "|", ";", " - "])

# =============================================================================
# AWS identifiers
# =============================================================================

# Sequence tokens as returned by CloudWatch
sequence_tokens = st.from_regex(r"[0-9]{20,56}", fullmatch=True)

# Kinesis partition keys (1-256 unicode chars)
partition_keys = st.text(
    alphabet=st.characters(exclude_categories=("Cs",)),
    min_size=1,
    max_size=256,
)

# Stream and group names
resource_names = st.from_regex(r"[A-Za-z0-9_.\-/]{1,64}", fullmatch=True)
