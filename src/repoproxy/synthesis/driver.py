"""The synthesis pass: scan, synthesize, bind, publish."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from repoproxy.catalog.types import InterfaceDescriptor, ProxyTypeDescriptor
from repoproxy.config import get_settings
from repoproxy.errors import ConfigurationError, RepoProxyError, SynthesisError
from repoproxy.ids import new_id
from repoproxy.logging import log_context
from repoproxy.registry import ProxyRegistry, find_duplicate_names
from repoproxy.synthesis.scanner import build_index, scan_catalog
from repoproxy.synthesis.synthesizer import synthesize_proxy
from repoproxy.version import VersionPolicy

logger = logging.getLogger(__name__)


def synthesize(
    catalog: Iterable[InterfaceDescriptor],
    version_suffix: str | None = None,
    marker: str | None = None,
) -> ProxyRegistry:
    """Build and publish a registry for every repository interface in `catalog`.

    Errors are collected across all interfaces; if any occurred the registry
    is left FAILED with no entries and SynthesisError is raised.
    """
    settings = get_settings()
    policy = VersionPolicy(
        suffix=settings.repo_version_suffix if version_suffix is None else version_suffix
    )
    marker_name = marker or settings.repo_marker_interface

    with log_context(
        synthesis_pass=new_id("syn"),
        version_suffix=policy.suffix,
        marker=marker_name,
    ):
        return _run_pass(list(catalog), policy, marker_name)


def _run_pass(
    declarations: list[InterfaceDescriptor],
    policy: VersionPolicy,
    marker_name: str,
) -> ProxyRegistry:
    registry = ProxyRegistry()
    registry.begin()
    logger.info("Synthesis started: %d declarations", len(declarations))

    index = build_index(declarations)
    descriptors: list[ProxyTypeDescriptor] = []
    errors: list[RepoProxyError] = []
    for interface in scan_catalog(declarations, marker_name):
        try:
            descriptors.append(synthesize_proxy(interface, index, policy, marker_name))
        except ConfigurationError as exc:
            logger.warning("Cannot synthesize proxy for %s: %s", interface.qualified_name, exc)
            errors.append(exc)
    errors.extend(find_duplicate_names(descriptors))

    if errors:
        registry.fail(errors)
        logger.error("Synthesis failed with %d error(s); nothing published", len(errors))
        raise SynthesisError(errors, registry=registry)

    registry.publish(descriptors)
    logger.info("Synthesis published %d proxies", len(registry))
    return registry
