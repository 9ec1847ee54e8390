"""Tests for gqlguard.fragments"""
