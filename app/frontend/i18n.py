"""
UI translations for the Streamlit app.
"""

from typing import Dict

DEFAULT_LANGUAGE = "id"
LANGUAGES = ("en", "id")

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        # Page content
        "app.title": "Video Summary AI",
        "app.description": "Get an instant AI-powered summary of any YouTube video",
        "app.input.label": "YouTube URL",
        "app.input.placeholder": "Paste YouTube URL here",
        "app.button.analyze": "Generate Summary",
        "app.button.analyzing": "Analyzing...",
        "app.button.reset": "Analyze Another Video",
        "app.loading": "Analyzing video content...",
        "app.error.url": "Please enter a YouTube URL",
        "app.error.analysis": "Failed to analyze video",
        "app.readTime": "{minutes} min read",

        # Analysis result
        "analysis.button.save": "Save Analysis",
        "analysis.button.saving": "Saving...",
        "analysis.button.saved": "Saved!",
        "analysis.button.error": "Error - Try Again",
        "analysis.title": "Analysis Result",
        "analysis.topic.title": "Topic",
        "analysis.keyPoints.title": "Key Points",
        "analysis.summary.title": "Summary",
        "analysis.raw.title": "Raw response",
        "analysis.error.title": "Unable to Parse Analysis",
        "analysis.error.description": "The analysis data couldn't be properly parsed. Here's the raw response:",
        "analysis.error.details": "Error details:",
        "analysis.noData": "No analysis data available",

        # Toggles
        "language.en": "English",
        "language.id": "Indonesian",
        "theme.light": "Light mode",
        "theme.dark": "Dark mode",
    },
    "id": {
        # Page content
        "app.title": "AI Ringkasan Video",
        "app.description": "Dapatkan ringkasan instan dari video YouTube dengan bantuan AI",
        "app.input.label": "URL YouTube",
        "app.input.placeholder": "Tempel URL YouTube di sini",
        "app.button.analyze": "Buat Ringkasan",
        "app.button.analyzing": "Menganalisis...",
        "app.button.reset": "Analisis Video Lain",
        "app.loading": "Menganalisis konten video...",
        "app.error.url": "Silakan masukkan URL YouTube",
        "app.error.analysis": "Gagal menganalisis video",
        "app.readTime": "{minutes} menit baca",

        # Analysis result
        "analysis.button.save": "Simpan Analisis",
        "analysis.button.saving": "Menyimpan...",
        "analysis.button.saved": "Tersimpan!",
        "analysis.button.error": "Error - Coba Lagi",
        "analysis.title": "Hasil Analisis",
        "analysis.topic.title": "Topik",
        "analysis.keyPoints.title": "Poin Utama",
        "analysis.summary.title": "Ringkasan",
        "analysis.raw.title": "Respons mentah",
        "analysis.error.title": "Tidak Dapat Mengurai Analisis",
        "analysis.error.description": "Data analisis tidak dapat diurai dengan benar. Berikut respons mentahnya:",
        "analysis.error.details": "Detail error:",
        "analysis.noData": "Tidak ada data analisis tersedia",

        # Toggles
        "language.en": "Bahasa Inggris",
        "language.id": "Bahasa Indonesia",
        "theme.light": "Mode terang",
        "theme.dark": "Mode gelap",
    },
}


def translate(key: str, language: str = DEFAULT_LANGUAGE, **kwargs) -> str:
    """
    Look up a UI string.

    Unknown languages fall back to the default one and unknown keys to the
    key itself.
    """
    table = TRANSLATIONS.get(language, TRANSLATIONS[DEFAULT_LANGUAGE])
    text = table.get(key, key)
    return text.format(**kwargs) if kwargs else text


def other_language(language: str) -> str:
    """The language the toggle switches to."""
    return "id" if language == "en" else "en"
