"""Proxy synthesis package."""

from repoproxy.synthesis.driver import synthesize
from repoproxy.synthesis.scanner import scan_catalog
from repoproxy.synthesis.synthesizer import select_base_interface, synthesize_proxy

__all__ = ["scan_catalog", "select_base_interface", "synthesize", "synthesize_proxy"]
