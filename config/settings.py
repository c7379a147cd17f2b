# config/settings.py
import logging
import os
from logging.handlers import RotatingFileHandler

from dotenv import load_dotenv
import google.generativeai as genai
import streamlit as st

load_dotenv()

MODEL_NAME = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "")
LOG_FILE = "quizgen.log"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

PDF_MIME_TYPE = "application/pdf"


_logging_configured = False


def setup_logging(level: str = LOG_LEVEL, log_dir: str = LOG_DIR):
    """Configure the root logger once per process (Streamlit reruns the script)."""
    global _logging_configured
    if _logging_configured:
        return
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(level.upper())

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE), maxBytes=5_000_000, backupCount=3
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)
    _logging_configured = True


def init_environment():
    """Load API key and configure logging, Streamlit & Gemini."""
    load_dotenv()
    api_key = os.getenv("GOOGLE_API_KEY")
    if not api_key:
        raise RuntimeError("GOOGLE_API_KEY not found in .env file.")
    setup_logging()
    genai.configure(api_key=api_key)
    st.set_page_config(page_title="Creativeminds PDF", page_icon="📘", layout="centered")
