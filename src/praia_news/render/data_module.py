"""TypeScript data module embedding a news document for the UI build."""

from __future__ import annotations

from praia_news.models import NewsDocument
from praia_news.render.templating import SourceTemplate, js_literal

EXPORT_NAME = "noticiasPraiaGrande"

_TEMPLATE = SourceTemplate("""\
// Gerado automaticamente a partir da coleta de %%{collected_at}
// Dados das notícias de %%{city}

export interface Noticia {
  titulo: string;
  resumo: string;
  categoria: string;
  relevancia: 'alta' | 'média' | 'baixa';
  fonte: string;
  url?: string;
  dataPublicacao: string;
  slug: string;
  imagemPlaceholder: string;
  engagementScore?: number;
  selected?: boolean;
}

export interface NoticiaData {
  metadata: {
    dataColeta: string;
    totalNoticias: number;
    cidade: string;
    estado: string;
  };
  conteudo: {
    manchetePrincipal: Noticia | null;
    noticias: Noticia[];
    sidebar: {
      temasEmDestaque: string[];
      sugestoesPautas: string[];
    };
  };
  seo: {
    title: string;
    description: string;
    keywords: string;
  };
}

export const %%{export_name}: NoticiaData = %%{document};
""")


def render_data_module(document: NewsDocument) -> str:
    """Render ``document`` verbatim as a typed ``NoticiaData`` constant."""
    return _TEMPLATE.substitute(
        collected_at=document.metadata.collected_at.replace("\n", " "),
        city=document.metadata.city.replace("\n", " "),
        export_name=EXPORT_NAME,
        document=js_literal(document.to_dict()),
    )
