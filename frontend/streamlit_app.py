import logging
import streamlit as st
from dotenv import load_dotenv

from frontend.search_view import (
    SearchView,
    format_card_lines,
    format_oxidation_states,
)

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

SEARCH_PLACEHOLDER = "Enter a compound or element (e.g. Cr, CrO3, CrO*). * are wildcards."


def get_view() -> SearchView:
    # One view per browser session, kept across reruns
    if "search_view" not in st.session_state:
        st.session_state["search_view"] = SearchView()
    return st.session_state["search_view"]


def render_results(view: SearchView) -> None:
    st.header("Results:")
    for item in view.results:
        with st.container(border=True):
            st.subheader(str(item.get("formula_pretty")))
            for line in format_card_lines(item):
                st.markdown(line)
            st.markdown("**Average Oxidation States:**")
            for line in format_oxidation_states(item):
                st.markdown(f"- {line}")


def main() -> None:
    st.title("Search Material Data")
    view = get_view()

    col_input, col_button = st.columns([4, 1])
    with col_input:
        view.query = st.text_input(
            "Search term",
            key="query",
            placeholder=SEARCH_PLACEHOLDER,
            label_visibility="collapsed",
        )
    with col_button:
        clicked = st.button(
            "Loading..." if view.loading else "Search",
            disabled=view.loading,
        )

    if clicked:
        with st.spinner("Loading..."):
            view.submit()

    if view.error:
        st.error(view.error)

    if view.results:
        render_results(view)


main()
