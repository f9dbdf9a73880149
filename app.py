"""
Shuffle Simulator Web App
Streamlit interface for running randomness batches.
"""

import pandas as pd
import streamlit as st

from shuffle_sim.engine.analyzer import COLOR_ENTROPY, VALUE_ENTROPY
from shuffle_sim.presets import PRESETS
from shuffle_sim.simulator import Simulator, SimulationConfig

# Page config
st.set_page_config(
    page_title="Shuffle Simulator",
    page_icon="🃏",
    layout="wide"
)

st.title("🃏 Shuffle Simulator")
st.markdown("*How random are the hands dealt after each shuffle technique?*")


@st.cache_resource
def get_simulator():
    return Simulator()


sim = get_simulator()

# Sidebar for settings
st.sidebar.header("Settings")

preset_options = list(PRESETS.keys())
selected_preset = st.sidebar.selectbox(
    "Shuffle Preset",
    options=preset_options,
    format_func=lambda x: PRESETS[x].name
)

preset = PRESETS[selected_preset]
st.sidebar.markdown(f"*{preset.description}*")
if preset.steps:
    st.sidebar.markdown("**Steps:** " + ", ".join(str(s) for s in preset.steps))
else:
    st.sidebar.warning("No shuffle: hands come straight from the canonical deck order")

iterations = st.sidebar.slider("Trials", min_value=100, max_value=5000, value=1000, step=100)
shuffle_times = st.sidebar.slider("Shuffle Repetitions", min_value=0, max_value=10, value=2)

st.divider()

if st.button("🎲 Run Analysis", type="primary", use_container_width=True):
    config = SimulationConfig(iterations=iterations, shuffle_times=shuffle_times, preset=selected_preset)

    with st.spinner(f"Running {iterations} trials..."):
        result = sim.run_batch(config)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Avg Color Entropy", f"{result.avg_color_entropy:.4f}")
    with col2:
        st.metric("Avg Value Entropy", f"{result.avg_value_entropy:.4f}")
    with col3:
        st.metric("Trials", result.iterations)

    rows = [
        {"Metric": key, "Average": value, "Trials Observed": result.contributions[key]}
        for key, value in result.averages.items()
        if key not in (COLOR_ENTROPY, VALUE_ENTROPY)
    ]
    df = pd.DataFrame(rows)

    st.subheader("Color Distribution")
    colors = df[df["Metric"].str.startswith("Color: ")]
    st.bar_chart(colors.assign(Metric=colors["Metric"].str.slice(7)).set_index("Metric")["Average"])

    st.subheader("Value Distribution")
    values = df[df["Metric"].str.startswith("Value: ")]
    st.bar_chart(values.assign(Metric=values["Metric"].str.slice(7)).set_index("Metric")["Average"])

    with st.expander("📜 Full Report"):
        st.code(result.report())

    st.dataframe(df, use_container_width=True)

# Footer
st.divider()
st.markdown("*Built with the shuffle_sim engine*")
