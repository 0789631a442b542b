"""Self-contained HTML report of a news document."""

from __future__ import annotations

from html import escape

from praia_news.models import NewsDocument, NewsItem
from praia_news.render.presentation import (
    ENGAGEMENT_ICONS,
    category_hex,
    collection_year,
    count_by_engagement,
    count_by_relevance,
    engagement_band,
    format_date_br,
    format_datetime_br,
    rank_medal,
    relevance_css,
)

_CSS = """\
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Arial, sans-serif; line-height: 1.6; color: #333; background: #f5f5f5; }
        .container { max-width: 1200px; margin: 0 auto; padding: 20px; }
        .header { background: linear-gradient(135deg, #2563eb, #1e40af); color: white; padding: 30px; border-radius: 8px; margin-bottom: 30px; }
        .header h1 { font-size: 2.5em; margin-bottom: 10px; }
        .header-info { opacity: 0.9; font-size: 0.95em; }
        .manchete { background: white; padding: 30px; margin: 20px 0; border-left: 4px solid #ef4444; border-radius: 8px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); }
        .manchete h2 { color: #ef4444; margin-bottom: 15px; font-size: 1.5em; }
        .manchete h3 { color: #111; margin-bottom: 15px; font-size: 1.8em; }
        .engagement-badge { display: inline-block; padding: 8px 16px; border-radius: 20px; font-weight: bold; font-size: 0.9em; margin: 10px 0; }
        .engagement-high { background: #dcfce7; color: #166534; }
        .engagement-medium { background: #fef3c7; color: #92400e; }
        .engagement-low { background: #f3f4f6; color: #4b5563; }
        .noticia { background: white; border-radius: 8px; padding: 20px; margin: 20px 0; box-shadow: 0 2px 8px rgba(0,0,0,0.1); position: relative; }
        .noticia.relevancia-alta { border-left: 4px solid #ef4444; }
        .noticia.relevancia-media { border-left: 4px solid #f59e0b; }
        .noticia.relevancia-baixa { border-left: 4px solid #10b981; }
        .noticia h3 { color: #111; margin-bottom: 15px; font-size: 1.3em; }
        .rank-badge { position: absolute; top: 20px; right: 20px; font-size: 2em; }
        .categoria { display: inline-block; color: white; padding: 6px 14px; border-radius: 20px; font-size: 0.85em; margin-right: 10px; }
        .meta { color: #666; font-size: 0.9em; margin-top: 15px; }
        .missing-link { color: #999; margin-top: 10px; }
        .sidebar { background: #f9fafb; padding: 20px; border-radius: 8px; margin: 20px 0; }
        .sidebar h3 { color: #111; margin-bottom: 15px; font-size: 1.2em; }
        .sidebar ul { padding-left: 20px; }
        .sidebar li { margin: 8px 0; }
        .tag { display: inline-block; background: #e5e7eb; color: #374151; padding: 6px 12px; margin: 4px; border-radius: 6px; font-size: 0.85em; }
        .stats { display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 15px; margin: 20px 0; }
        .stat-card { background: white; padding: 20px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.05); }
        .stat-value { font-size: 2em; font-weight: bold; color: #2563eb; }
        .stat-label { color: #666; font-size: 0.9em; }
        .ranking-title { margin: 40px 0 20px 0; font-size: 1.8em; }
        .footer { text-align: center; padding: 30px; color: #666; }
        a { color: #2563eb; text-decoration: none; }
        a:hover { text-decoration: underline; }
        .btn { display: inline-block; background: #2563eb; color: white; padding: 10px 20px; border-radius: 6px; margin-top: 15px; }
        .btn:hover { background: #1e40af; text-decoration: none; }
"""


def _esc(text: str) -> str:
    return escape(text or "", quote=True)


def _stat_card(key: str, value: int, label: str) -> str:
    return (
        f'<div class="stat-card" data-stat="{key}">'
        f'<div class="stat-value">{value}</div>'
        f'<div class="stat-label">{label}</div></div>'
    )


def _engagement_badge(item: NewsItem, prefix: str = "Engajamento: ") -> str:
    if item.engagement_score is None:
        return ""
    band = engagement_band(item.engagement_score)
    return (
        f'<span class="engagement-badge engagement-{band}">'
        f"{ENGAGEMENT_ICONS[band]} {prefix}{item.engagement_score}/100</span>"
    )


def _category_chip(category: str) -> str:
    return f'<span class="categoria" style="background: {category_hex(category)};">{_esc(category)}</span>'


def _link(item: NewsItem, label: str) -> str:
    if item.url:
        return f'<a href="{_esc(item.url)}" target="_blank" rel="noopener noreferrer" class="btn">{label}</a>'
    return '<p class="meta missing-link">Link não disponível</p>'


def _render_stats(document: NewsDocument) -> str:
    items = document.content.items
    engagement = count_by_engagement(items)
    relevance = count_by_relevance(items)
    cards = [
        _stat_card("total", document.metadata.total, "Total publicadas"),
        _stat_card("engagement-high", engagement["high"], "🔥 Alto Engajamento"),
        _stat_card("engagement-medium", engagement["medium"], "⭐ Médio Engajamento"),
        _stat_card("engagement-low", engagement["low"], "📌 Baixo Engajamento"),
        _stat_card("relevance-alta", relevance["alta"], "Alta Relevância"),
        _stat_card("relevance-media", relevance["média"], "Média Relevância"),
        _stat_card("relevance-baixa", relevance["baixa"], "Baixa Relevância"),
    ]
    body = "\n            ".join(cards)
    return f"""
        <div class="stats">
            {body}
        </div>
"""


def _render_headline(item: NewsItem | None) -> str:
    if item is None:
        return ""
    return f"""
        <div class="manchete">
            <h2>🔥 Manchete Principal</h2>
            {_engagement_badge(item)}
            <h3>{_esc(item.title)}</h3>
            <p>{_esc(item.summary)}</p>
            <div class="meta">
                {_category_chip(item.category)}
                Fonte: <strong>{_esc(item.source)}</strong> | {_esc(format_date_br(item.published_date))}
            </div>
            {_link(item, "Ler notícia completa →")}
        </div>
"""


def _render_item(item: NewsItem, rank: int) -> str:
    return f"""
        <div class="noticia relevancia-{relevance_css(item.relevance)}" id="{_esc(item.slug)}">
            <span class="rank-badge">{rank_medal(rank)}</span>
            {_engagement_badge(item)}
            <h3>{_esc(item.title)}</h3>
            <p>{_esc(item.summary)}</p>
            <div class="meta">
                {_category_chip(item.category)}
                <span>Relevância: {_esc(item.relevance)}</span> |
                <strong>Fonte:</strong> {_esc(item.source)} |
                {_esc(format_date_br(item.published_date))}
            </div>
            {_link(item, "Ler mais →")}
        </div>
"""


def _render_sidebar(document: NewsDocument) -> str:
    sidebar = document.content.sidebar
    tags = "".join(f'<span class="tag">{_esc(theme)}</span>' for theme in sidebar.highlighted_themes)
    topics = "".join(f"<li>{_esc(topic)}</li>" for topic in sidebar.suggested_topics)
    return f"""
        <div class="sidebar">
            <h3>🏷️ Temas em Destaque</h3>
            <div>{tags}</div>

            <h3 style="margin-top: 30px;">💡 Sugestões de Pautas</h3>
            <ul>{topics}</ul>
        </div>
"""


def render_html_report(document: NewsDocument) -> str:
    """Render ``document`` as a standalone HTML page with inline CSS."""
    metadata = document.metadata
    seo = document.seo
    ranking = "".join(_render_item(item, rank) for rank, item in enumerate(document.content.items, start=1))
    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{_esc(seo.title)}</title>
    <meta name="description" content="{_esc(seo.description)}">
    <meta name="keywords" content="{_esc(seo.keywords)}">
    <style>
{_CSS}    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>📰 Notícias de {_esc(metadata.city)} - SP</h1>
            <div class="header-info">
                <p>📅 Atualizado em: {_esc(format_datetime_br(metadata.collected_at))}</p>
                <p>📊 Total de notícias publicadas: {metadata.total}</p>
            </div>
        </div>
{_render_stats(document)}{_render_headline(document.content.headline)}
        <h2 class="ranking-title">📋 Ranking de Notícias por Engajamento</h2>
{ranking}{_render_sidebar(document)}
        <div class="footer">
            <p>© {collection_year(metadata.collected_at)} Notícias de {_esc(metadata.city)} - Gerado automaticamente</p>
        </div>
    </div>
</body>
</html>
"""
