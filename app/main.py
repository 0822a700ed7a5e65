import sys
import os
import streamlit as st

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from monadkit import Either, Left, List, Maybe, NonEmptyList, Right
from monadkit.playground import describe, parse_numbers, safe_divide, summarize


# ============ Initialization ============
st.set_page_config(
    page_title="monadkit playground",
    layout="wide",
    initial_sidebar_state="expanded",
)


def show(container):
    """Render one container as tag + payload."""
    info = describe(container)
    if info["tag"] in ("Nothing", "Left", "Nil"):
        st.warning(f"{info['type']} / {info['tag']}: {info['value']!r}")
    else:
        st.success(f"{info['type']} / {info['tag']}: {info['value']!r}")


# ============ HEADER ============
st.title("monadkit playground")
st.caption("Maybe | Either | List | NonEmptyList")

# ============ SIDEBAR ============
with st.sidebar:
    st.header("Navigation")
    page = st.radio(
        "Section:",
        ["List", "Maybe", "Either"],
        label_visibility="collapsed",
    )


# ============ PAGE: LIST ============
if page == "List":
    st.header("List")

    text = st.text_input("Numbers (comma or space separated)", "1, 2, 3, 12, 7")
    threshold = st.number_input("Threshold for find()", value=10, step=1)

    parsed = parse_numbers(text)
    show(parsed)

    if parsed.is_right():
        numbers = parsed.right()
        summary = summarize(numbers, int(threshold))

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("size()", summary["size"])
            st.metric("sum (fold_left)", summary["total"])
        with col2:
            st.write("filter(even)", summary["evens"])
            st.write("map(x * 2)", summary["doubled"])
        with col3:
            st.write("find(x > threshold)", summary["first_above"])
            st.write("NonEmptyList.from_list", summary["non_empty"])

        st.subheader("reverse()")
        show(numbers.reverse())


# ============ PAGE: MAYBE ============
elif page == "Maybe":
    st.header("Maybe")

    col1, col2 = st.columns(2)
    with col1:
        numerator = st.number_input("Numerator", value=10.0)
    with col2:
        denominator = st.number_input("Denominator", value=0.0)

    st.subheader("safe_divide (Maybe.map swallows ZeroDivisionError)")
    result = safe_divide(numerator, denominator)
    show(result)
    st.write("get_or_else(0)", result.get_or_else(0))
    st.write("to_either('division by zero')", repr(result.to_either("division by zero")))

    st.subheader("Maybe.from_null")
    raw = st.text_input("Value (empty means None)", "")
    show(Maybe.from_null(raw or None))


# ============ PAGE: EITHER ============
elif page == "Either":
    st.header("Either")

    side = st.radio("Side", ["Right", "Left"], horizontal=True)
    payload = st.text_input("Payload", "hello")
    either: Either = Right(payload) if side == "Right" else Left(payload)

    show(either)
    st.write("map(len)", repr(either.map(len)))
    st.write("left_map(str.upper)", repr(either.left_map(str.upper)))
    st.write("swap()", repr(either.swap()))
    st.write("to_maybe()", repr(either.to_maybe()))

    st.subheader("NonEmptyList.from_array(payload)")
    show(NonEmptyList.from_array(payload).map(List.to_array))
