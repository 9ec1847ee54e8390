"""Tests for gqlguard.language"""
