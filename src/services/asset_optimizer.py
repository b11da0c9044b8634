"""
Static asset size reduction for the storefront.

These are plain regex rewrites, not parsers: they are tuned for the
storefront's own hand-written style.css and script.js.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Set

from constants.catalog_fields import DYNAMIC_CSS_CLASSES
from models.catalog import BuildIssues

logger = logging.getLogger(__name__)

CSS_FILE = "style.css"
JS_FILE = "script.js"
HTML_FILE = "index.html"

_QUOTED = re.compile(r"[\"']([^\"']*)[\"']")
_HTML_CLASS = re.compile(r"class[=\s]*[\"'][^\"']*[\"']")
_HTML_ID = re.compile(r"id[=\s]*[\"'][^\"']*[\"']")
_JS_CLASS = re.compile(r"className\s*[=:]\s*[\"'][^\"']*[\"']")
_JS_ID = re.compile(r"getElementById\s*\(\s*[\"'][^\"']*[\"']\s*\)")
_ELEMENT_SELECTOR = re.compile(r"^[a-z]+(\s|,|:|>|\+|~|$)")


@dataclass
class AssetOptimization:
    css_optimized: bool = False
    js_optimized: bool = False
    original_css_size: int = 0
    final_css_size: int = 0
    original_js_size: int = 0
    final_js_size: int = 0

    @property
    def assets_minified(self) -> bool:
        return self.css_optimized or self.js_optimized


def minify_css(css: str) -> str:
    css = re.sub(r"/\*[\s\S]*?\*/", "", css)
    css = re.sub(r"\s+", " ", css)
    css = re.sub(r"\s*([{}:;,>+~])\s*", r"\1", css)
    css = css.replace(";}", "}")
    return css.strip()


def minify_js(js: str) -> str:
    # keeps // inside lines that contain a URL
    js = re.sub(r"//(?![^\r\n]*https?://)[^\r\n]*", "", js)
    js = re.sub(r"/\*[\s\S]*?\*/", "", js)
    js = re.sub(r"\s+", " ", js)
    js = re.sub(r"\s*([=+\-*/<>!&|(){}\[\],;])\s*", r"\1", js)
    js = re.sub(r";(\s*})", r"\1", js)
    return js.strip()


def _quoted_tokens(matches: Iterable[str]) -> Set[str]:
    tokens: Set[str] = set()
    for match in matches:
        quoted = _QUOTED.search(match)
        if quoted:
            tokens.update(t for t in quoted.group(1).split() if t)
    return tokens


def used_selectors(html: str, js: str):
    classes = _quoted_tokens(_HTML_CLASS.findall(html)) | _quoted_tokens(_JS_CLASS.findall(js))
    classes.update(DYNAMIC_CSS_CLASSES)
    ids = _quoted_tokens(_HTML_ID.findall(html)) | _quoted_tokens(_JS_ID.findall(js))
    return classes, ids


def _keep_rule(selector: str, classes: Set[str], ids: Set[str]) -> bool:
    if any(marker in selector for marker in (":root", "@media", "@keyframes")):
        return True
    if _ELEMENT_SELECTOR.match(selector.strip()):
        return True
    return any(f".{c}" in selector for c in classes) or any(f"#{i}" in selector for i in ids)


def remove_unused_css(css: str, html: str, js: str) -> str:
    classes, ids = used_selectors(html, js)
    kept = []
    for rule in css.split("}"):
        if not rule.strip():
            continue
        selector = rule.split("{")[0]
        if selector and _keep_rule(selector, classes, ids):
            kept.append(rule)
    return "}".join(kept) + "}"


def _read(path: Path, issues: BuildIssues) -> str:
    if not path.exists():
        logger.warning(f"{path.name} not found, skipping its optimization")
        return ""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _warn(issues, f"Could not read {path.name}, skipping its optimization: {e}")
        return ""
    logger.info(f"Read {path.name}: {round(len(content) / 1024)}KB")
    return content


def optimize_assets(public_dir: Path, issues: BuildIssues) -> AssetOptimization:
    """Purge and minify style.css, minify script.js; rewrite both in place."""
    result = AssetOptimization()
    css_path = public_dir / CSS_FILE
    js_path = public_dir / JS_FILE

    css = _read(css_path, issues)
    js = _read(js_path, issues)
    html = _read(public_dir / HTML_FILE, issues)

    if css:
        result.original_css_size = len(css)
        try:
            purged = remove_unused_css(css, html, js)
            minified = minify_css(purged)
            css_path.write_text(minified, encoding="utf-8")
            result.final_css_size = len(minified)
            result.css_optimized = True
            logger.info(f"CSS optimized: {len(css)} -> {len(minified)} bytes")
        except (OSError, re.error) as e:
            _warn(issues, f"CSS optimization failed: {e}")

    if js:
        result.original_js_size = len(js)
        try:
            minified = minify_js(js)
            js_path.write_text(minified, encoding="utf-8")
            result.final_js_size = len(minified)
            result.js_optimized = True
            logger.info(f"JS optimized: {len(js)} -> {len(minified)} bytes")
        except (OSError, re.error) as e:
            _warn(issues, f"JavaScript optimization failed: {e}")

    return result


def _warn(issues: BuildIssues, message: str) -> None:
    logger.warning(message)
    issues.warn(message)
