"""CSS styles for DSM HTML export."""

CSS = """
:root {
    --bg-color: #f8f9fa;
    --text-color: #212529;
    --border-color: #dee2e6;
    --header-bg: #fafafa;
    --diagonal-bg: #9e9e9e;
    --band-0: #e8f5e9;
    --band-1: #c8e6c9;
    --band-2: #a5d6a7;
    --band-3: #81c784;
}

* {
    box-sizing: border-box;
    margin: 0;
    padding: 0;
}

body {
    font-family: Arial, -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
    line-height: 1.4;
    color: var(--text-color);
    background-color: var(--bg-color);
}

header {
    background: linear-gradient(135deg, #43a047 0%, #1b5e20 100%);
    color: white;
    padding: 1.5rem 2rem;
}

header h1 {
    font-size: 1.6rem;
}

header .subtitle {
    opacity: 0.85;
}

main {
    padding: 1.5rem 2rem;
}

.summary {
    margin-bottom: 1rem;
}

.summary dt {
    font-weight: bold;
    float: left;
    clear: left;
    width: 10rem;
}

.summary dd {
    margin-left: 10rem;
}

.dsm-wrapper {
    overflow: auto;
    max-height: 85vh;
}

table.dsm {
    border-collapse: collapse;
    font-size: 0.9rem;
}

table.dsm th, table.dsm td {
    border: 1px solid var(--border-color);
    min-width: 2em;
    height: 2em;
    text-align: center;
    padding: 0 0.25rem;
}

table.dsm thead th {
    position: sticky;
    top: 0;
    background: var(--header-bg);
    font-weight: normal;
    z-index: 2;
}

table.dsm th.name {
    text-align: right;
    position: sticky;
    left: 0;
    z-index: 1;
    font-weight: bold;
    white-space: nowrap;
}

table.dsm thead th.name {
    z-index: 3;
}

table.dsm td.mark {
    font-weight: bold;
}

table.dsm td.diagonal {
    background: var(--diagonal-bg);
}

table.dsm td.count {
    text-align: left;
}

table.dsm tfoot th, table.dsm tfoot td {
    background: var(--header-bg);
}

.band-0 { background: var(--band-0); }
.band-1 { background: var(--band-1); }
.band-2 { background: var(--band-2); }
.band-3 { background: var(--band-3); }
"""
