from pathlib import Path
import sys

SRC_DIR = Path(__file__).resolve().parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

import streamlit as st
from weather_client.config import create_client, get_settings
from weather_client.errors import WeatherClientError

st.set_page_config(page_title="Current Weather", page_icon="☁")

st.title("Current Weather")
st.caption("Live conditions from OpenWeatherMap")

settings = get_settings()

with st.sidebar:
    st.subheader("Configuration")
    st.markdown("Ensure `.env` contains `OPENWEATHER_API_KEY`.")
    st.code(f"Endpoint: {settings.openweather_base_url}\nTimeout: {settings.openweather_timeout}", language="text")

try:
    client = create_client(settings)
except WeatherClientError as err:
    st.error(f"Configuration error: {err}")
    st.stop()

city = st.text_input("City", value=settings.default_city)
use_celsius = st.radio("Units", ["Celsius", "Fahrenheit"], horizontal=True) == "Celsius"

if st.button("Get weather"):
    try:
        result = client.fetch_weather(city, use_celsius)
    except WeatherClientError as err:
        st.error(f"Weather lookup failed: {err}")
    else:
        if result.success:
            st.image(f"https://openweathermap.org/img/wn/{result.data.icon}@2x.png")
            st.markdown(result.data.to_summary())
        else:
            st.warning(result.message)
        with st.expander("Raw result"):
            st.json(result.to_dict())
