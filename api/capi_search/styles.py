from .pillars import BRAND, NEUTRAL

GAP = 20
COLUMN_WIDTH = 300
IMAGE_RATIO = 5 / 3
MAX_COLUMNS = 8

BODY_FONT = "font-family: GuardianTextEgyptian, Georgia, serif; font-size: 1.0625rem; line-height: 1.4"
HEADLINE_FONT = "font-family: GHGuardianHeadline, Georgia, serif; line-height: 1.15"
SANS_FONT = "font-family: GuardianTextSans, Helvetica Neue, Helvetica, Arial, sans-serif; font-size: 0.75rem"

def _column_queries() -> str:
    return "\n".join(
        f"@media screen and (min-width: {columns * (GAP + COLUMN_WIDTH)}px) "
        f"{{ body {{ --columns: {columns}; }} }}"
        for columns in range(MAX_COLUMNS)
    )

def page_styles() -> str:
    return f"""/* generated styles */

body {{
    --columns: 1;
    --gaps: var(--columns) - 1;
    width: calc(var(--columns) * {COLUMN_WIDTH}px + (var(--gaps)) * {GAP}px);
    margin: auto;

    {BODY_FONT};
}}

{_column_queries()}

h1 {{ {HEADLINE_FONT}; font-size: 2.125rem; color: {BRAND[400]} }}

ul#results {{
    display: grid;
    padding: 0;
    list-style-type: none;
    width: min-content;

    grid-template-columns: repeat(var(--columns), {COLUMN_WIDTH}px);
    gap: {GAP}px;
}}

.result a {{
    border-top: 1px solid var(--border);
    display: grid;
    grid-template-rows: {COLUMN_WIDTH / IMAGE_RATIO:g}px auto auto auto 1fr auto;
    text-decoration: none;

    color: var(--text, {NEUTRAL[10]});
    background-color: var(--background, {NEUTRAL[97]});

    padding: 0.25rem;
    gap: 0.25rem;
    box-sizing: border-box;
    height: 100%;
}}

.result :is(h2, h3, h4, p) {{
    margin: 0;
    padding: 0
}}

.result .date {{
    text-align: right;
    align-self: end;
    grid-row-end: -1;
    {SANS_FONT};
}}

.result h2 {{
    color: var(--headline);
    {HEADLINE_FONT}; font-size: 1.25rem;
}}

.result h3 {{
    {HEADLINE_FONT}; font-size: 1.0625rem; font-weight: 300; font-style: italic;
}}

.result img {{
    margin: -0.25rem;
    margin-bottom: 0;
    display: block;
}}

.result:hover {{
    --background: {NEUTRAL[86]};
}}

.result:hover img {{
    opacity: 0.875;
}}

.error {{
    color: #C70000;
}}
"""
