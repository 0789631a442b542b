"""Next.js page component (JSX) embedding a news document.

The document and every styling table are interpolated as JSON literals;
no document text is ever spliced into JSX markup directly.
"""

from __future__ import annotations

from praia_news.models import NewsDocument
from praia_news.render.presentation import (
    CATEGORY_COLORS,
    ENGAGEMENT_COLORS,
    ENGAGEMENT_ICONS,
    FALLBACK_CATEGORY_COLOR,
    HIGH_ENGAGEMENT,
    MEDIUM_ENGAGEMENT,
    RANK_MEDALS,
    RELEVANCE_DOTS,
    RELEVANCE_STYLES,
)
from praia_news.render.templating import SourceTemplate, js_literal

COMPONENT_NAME = "NoticiasPraiaGrande"

_TEMPLATE = SourceTemplate("""\
import Head from 'next/head';

export default function %%{component_name}() {
  const metadata = %%{metadata};

  const manchete = %%{headline};

  const noticias = %%{items};

  const temasEmDestaque = %%{themes};

  const sugestoesPautas = %%{topics};

  const seo = %%{seo};

  const categoriaColors = %%{category_colors};

  const relevanciaStyles = %%{relevance_styles};

  const relevanciaDots = %%{relevance_dots};

  const engagementColors = %%{engagement_colors};

  const engagementIcons = %%{engagement_icons};

  const rankMedals = %%{rank_medals};

  const getCategoriaColor = (categoria) => categoriaColors[categoria] || %%{fallback_color};

  const getRelevanciaStyles = (relevancia) => relevanciaStyles[relevancia] || relevanciaStyles['baixa'];

  const getEngagementBand = (score) => {
    if ((score || 0) >= %%{high}) return 'high';
    if ((score || 0) >= %%{medium}) return 'medium';
    return 'low';
  };

  const getEngagementColor = (score) => engagementColors[getEngagementBand(score)];

  const getEngagementIcon = (score) => engagementIcons[getEngagementBand(score)];

  const getRankMedal = (rank) => rankMedals[rank] || `#${rank}`;

  const countByBand = (band) => noticias.filter(n => getEngagementBand(n.engagementScore) === band).length;

  return (
    <>
      <Head>
        <title>{seo.title}</title>
        <meta name="description" content={seo.description} />
        <meta name="keywords" content={seo.keywords} />
        <meta property="og:title" content={seo.title} />
        <meta property="og:description" content={seo.description} />
        <meta property="og:type" content="article" />
        <meta name="twitter:card" content="summary_large_image" />
        <meta name="twitter:title" content={seo.title} />
        <meta name="twitter:description" content={seo.description} />
      </Head>

      <div className="min-h-screen bg-gradient-to-br from-gray-50 to-gray-100">
        <header className="bg-gradient-to-r from-blue-600 to-blue-800 text-white py-8 shadow-lg">
          <div className="container mx-auto px-4">
            <h1 className="text-4xl font-bold mb-2">📰 Notícias de {metadata.cidade}</h1>
            <p className="text-blue-100">
              Atualizado em: {new Date(metadata.dataColeta).toLocaleString('pt-BR')}
            </p>
            <p className="text-blue-100">
              {metadata.totalNoticias} notícias selecionadas
            </p>
          </div>
        </header>

        <div className="container mx-auto px-4 py-8">
          <div className="grid grid-cols-1 lg:grid-cols-3 gap-8">
            <div className="lg:col-span-2">
              {manchete && (
                <div className="bg-white rounded-lg shadow-lg p-6 mb-8 border-t-4 border-red-500">
                  <div className="flex items-center justify-between mb-4">
                    <div className="flex items-center gap-2">
                      <span className="text-2xl">🔥</span>
                      <h2 className="text-2xl font-bold text-gray-900">Manchete Principal</h2>
                    </div>
                    {manchete.engagementScore !== undefined && (
                      <div className={`px-4 py-2 rounded-lg font-bold flex items-center gap-2 ${getEngagementColor(manchete.engagementScore)}`}>
                        <span className="text-xl">{getEngagementIcon(manchete.engagementScore)}</span>
                        <span>Engajamento: {manchete.engagementScore}/100</span>
                      </div>
                    )}
                  </div>

                  <h3 className="text-3xl font-bold text-gray-900 mb-4">{manchete.titulo}</h3>

                  <p className="text-gray-700 text-lg mb-4 leading-relaxed">{manchete.resumo}</p>

                  <div className="flex flex-wrap items-center gap-3 mb-4">
                    <span className={`${getCategoriaColor(manchete.categoria)} text-white px-4 py-1 rounded-full text-sm font-semibold`}>
                      {manchete.categoria}
                    </span>
                    <span className="text-gray-600 text-sm">
                      Fonte: <span className="font-semibold">{manchete.fonte}</span>
                    </span>
                    <span className="text-gray-500 text-sm">
                      {new Date(manchete.dataPublicacao).toLocaleDateString('pt-BR')}
                    </span>
                  </div>

                  {manchete.url ? (
                    <a
                      href={manchete.url}
                      target="_blank"
                      rel="noopener noreferrer"
                      className="inline-block bg-blue-600 hover:bg-blue-700 text-white font-semibold py-2 px-6 rounded-lg transition-colors"
                    >
                      Ler notícia completa →
                    </a>
                  ) : (
                    <div className="text-gray-500 text-sm italic">Link da fonte não disponível</div>
                  )}
                </div>
              )}

              <div className="mb-8">
                <h2 className="text-2xl font-bold text-gray-900 mb-6">📋 Ranking de Notícias por Engajamento</h2>

                <div className="space-y-6">
                  {noticias.map((noticia, index) => (
                    <article
                      key={noticia.slug + '-' + index}
                      className={`bg-white rounded-lg shadow-md p-6 hover:shadow-lg transition-shadow ${getRelevanciaStyles(noticia.relevancia)}`}
                    >
                      <div className="flex items-center justify-between mb-3">
                        <span className="text-2xl font-bold">{getRankMedal(index + 1)}</span>
                        {noticia.engagementScore !== undefined && (
                          <div className={`px-3 py-1 rounded-lg text-sm font-semibold flex items-center gap-1 ${getEngagementColor(noticia.engagementScore)}`}>
                            <span>{getEngagementIcon(noticia.engagementScore)}</span>
                            <span>{noticia.engagementScore}/100</span>
                          </div>
                        )}
                      </div>

                      <h3 className="text-xl font-bold text-gray-900 mb-3">{noticia.titulo}</h3>

                      <p className="text-gray-700 mb-4 leading-relaxed">{noticia.resumo}</p>

                      <div className="flex flex-wrap items-center gap-3 mb-3">
                        <span className={`${getCategoriaColor(noticia.categoria)} text-white px-3 py-1 rounded-full text-xs font-semibold`}>
                          {noticia.categoria}
                        </span>
                        <span className="inline-flex items-center gap-1 text-xs">
                          <span className={`w-2 h-2 rounded-full ${relevanciaDots[noticia.relevancia] || relevanciaDots['baixa']}`}></span>
                          Relevância: {noticia.relevancia}
                        </span>
                      </div>

                      <div className="flex flex-wrap items-center justify-between gap-3 text-sm text-gray-600">
                        <span>
                          Fonte: <span className="font-semibold">{noticia.fonte}</span>
                        </span>
                        <span>{new Date(noticia.dataPublicacao).toLocaleDateString('pt-BR')}</span>
                      </div>

                      {noticia.url ? (
                        <a
                          href={noticia.url}
                          target="_blank"
                          rel="noopener noreferrer"
                          className="inline-block mt-4 text-blue-600 hover:text-blue-800 font-semibold text-sm"
                        >
                          Ler mais →
                        </a>
                      ) : (
                        <div className="mt-4 text-gray-400 text-xs italic">Link não disponível</div>
                      )}
                    </article>
                  ))}
                </div>
              </div>
            </div>

            <div className="lg:col-span-1">
              <div className="sticky top-4 space-y-6">
                <div className="bg-white rounded-lg shadow-md p-6">
                  <h3 className="text-xl font-bold text-gray-900 mb-4 flex items-center gap-2">
                    <span>🏷️</span>
                    Temas em Destaque
                  </h3>
                  <div className="flex flex-wrap gap-2">
                    {temasEmDestaque.map((tema, index) => (
                      <span key={index} className="bg-gray-100 hover:bg-gray-200 text-gray-700 px-3 py-1 rounded-lg text-sm font-medium">
                        {tema}
                      </span>
                    ))}
                  </div>
                </div>

                <div className="bg-white rounded-lg shadow-md p-6">
                  <h3 className="text-xl font-bold text-gray-900 mb-4 flex items-center gap-2">
                    <span>💡</span>
                    Sugestões de Pautas
                  </h3>
                  <ul className="space-y-3">
                    {sugestoesPautas.map((pauta, index) => (
                      <li key={index} className="text-gray-700 text-sm leading-relaxed pl-4 border-l-2 border-blue-500">
                        {pauta}
                      </li>
                    ))}
                  </ul>
                </div>

                <div className="bg-gradient-to-br from-blue-50 to-blue-100 rounded-lg shadow-md p-6">
                  <h3 className="text-xl font-bold text-gray-900 mb-4 flex items-center gap-2">
                    <span>📊</span>
                    Estatísticas
                  </h3>
                  <div className="space-y-3">
                    <div className="flex justify-between items-center">
                      <span className="text-gray-700 text-sm">Total publicadas:</span>
                      <span className="font-bold text-blue-600">{metadata.totalNoticias}</span>
                    </div>
                    <hr className="border-gray-300" />
                    <div className="flex justify-between items-center">
                      <span className="text-gray-700 text-sm">{engagementIcons.high} Alto engajamento:</span>
                      <span className="font-bold text-green-600">{countByBand('high')}</span>
                    </div>
                    <div className="flex justify-between items-center">
                      <span className="text-gray-700 text-sm">{engagementIcons.medium} Médio engajamento:</span>
                      <span className="font-bold text-yellow-600">{countByBand('medium')}</span>
                    </div>
                    <div className="flex justify-between items-center">
                      <span className="text-gray-700 text-sm">{engagementIcons.low} Baixo engajamento:</span>
                      <span className="font-bold text-gray-600">{countByBand('low')}</span>
                    </div>
                  </div>
                </div>
              </div>
            </div>
          </div>
        </div>

        <footer className="bg-gray-800 text-white py-6 mt-12">
          <div className="container mx-auto px-4 text-center">
            <p className="text-gray-300">
              © {new Date(metadata.dataColeta).getFullYear()} Notícias de {metadata.cidade} - Atualizado diariamente
            </p>
          </div>
        </footer>
      </div>
    </>
  );
}
""")


def render_component(document: NewsDocument) -> str:
    """Render ``document`` as the source of a self-contained Next.js page component."""
    data = document.to_dict()
    content = data["conteudo"]
    return _TEMPLATE.substitute(
        component_name=COMPONENT_NAME,
        metadata=js_literal(data["metadata"]),
        headline=js_literal(content["manchetePrincipal"]),
        items=js_literal(content["noticias"]),
        themes=js_literal(content["sidebar"]["temasEmDestaque"]),
        topics=js_literal(content["sidebar"]["sugestoesPautas"]),
        seo=js_literal(data["seo"]),
        category_colors=js_literal(CATEGORY_COLORS),
        relevance_styles=js_literal(RELEVANCE_STYLES),
        relevance_dots=js_literal(RELEVANCE_DOTS),
        engagement_colors=js_literal(ENGAGEMENT_COLORS),
        engagement_icons=js_literal(ENGAGEMENT_ICONS),
        rank_medals=js_literal({str(rank): medal for rank, medal in RANK_MEDALS.items()}),
        fallback_color=js_literal(FALLBACK_CATEGORY_COLOR),
        high=HIGH_ENGAGEMENT,
        medium=MEDIUM_ENGAGEMENT,
    )
