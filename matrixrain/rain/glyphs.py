# alfabeto compartilhado por todas as colunas
GLYPHS: tuple[str, ...] = ("0", "1")  # "2".."9" desligados

COLUMN_WIDTH  = 26.0        # largura estimada de uma coluna (px)
GLYPH_COUNT   = (10, 30)    # quantos glifos por coluna
FONT_SIZE     = (15, 22)    # tamanho da fonte monoespaçada
FALL_SPEED    = (30.0, 90.0)  # px/seg
ROW_SPACING   = 8.0         # espaço entre linhas da pilha
GLYPH_INTERVAL = 0.5        # seg entre sorteios de cada glifo
SUBSTITUTION_PERCENT = 2.0  # chance (em %) de trocar o glifo num tick

MATRIX_GREEN = (3, 160, 98)
BLACK        = (0, 0, 0)
