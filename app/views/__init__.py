"""View renderers for Study Deck"""
