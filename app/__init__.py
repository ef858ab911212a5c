"""Streamlit front end for Study Deck"""
