"""Prompt text sent to the generation endpoint."""

_PROMPT_TEMPLATE = (
    "Forneça informações nutricionais médias por 100g do prato {product}. "
    "Inclua: Valor energético (kcal), Açúcares totais (g), Gorduras saturadas (g), "
    "Sódio (mg), Proteínas (g), Fibras alimentares (g), "
    "% de frutas, legumes e oleaginosas. "
    "Se possível, baseie-se em fontes confiáveis, como tabelas nutricionais oficiais "
    "ou informações de rótulos de produtos similares. "
    "Caso haja variações dependendo do preparo, forneça uma média geral. "
    "Não traga as informações nutricionais na forma de tabela."
)


def build_prompt(product_name: str) -> str:
    """Render the nutrition request for a product name."""
    return _PROMPT_TEMPLATE.format(product=product_name.strip())
