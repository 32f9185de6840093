"""Tests for Travel Insights service."""
