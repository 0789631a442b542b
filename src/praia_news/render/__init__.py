"""Artifact renderers. Each is a pure function of a :class:`NewsDocument`."""

from praia_news.render.component import render_component
from praia_news.render.data_module import render_data_module
from praia_news.render.html_report import render_html_report
from praia_news.render.json_renderer import render_json

__all__ = ["render_component", "render_data_module", "render_html_report", "render_json"]
