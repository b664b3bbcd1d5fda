"""
Static vocabulary tables for the embedded languages.
"""

# --- Script ---
SCRIPT_KEYWORDS = frozenset([
    'const', 'let', 'var', 'function', 'return', 'if', 'else', 'for', 'while', 'do',
    'switch', 'case', 'break', 'continue', 'class', 'extends', 'import', 'export',
    'default', 'async', 'await', 'try', 'catch', 'finally', 'throw', 'new', 'this',
    'super', 'null', 'undefined', 'true', 'false', 'typeof', 'instanceof', 'delete',
    'void', 'yield', 'static', 'private', 'public', 'in', 'with', 'debugger',
])

# --- CSS ---
CSS_PROPERTIES = (
    'align-content', 'align-items', 'align-self', 'all', 'animation', 'animation-delay',
    'animation-direction', 'animation-duration', 'animation-fill-mode', 'animation-iteration-count',
    'animation-name', 'animation-play-state', 'animation-timing-function', 'backdrop-filter',
    'backface-visibility', 'background', 'background-attachment', 'background-blend-mode',
    'background-clip', 'background-color', 'background-image', 'background-origin', 'background-position',
    'background-repeat', 'background-size', 'border', 'border-bottom', 'border-bottom-color',
    'border-bottom-left-radius', 'border-bottom-right-radius', 'border-bottom-style', 'border-bottom-width',
    'border-collapse', 'border-color', 'border-image', 'border-left', 'border-left-color',
    'border-left-style', 'border-left-width', 'border-radius', 'border-right', 'border-right-color',
    'border-right-style', 'border-right-width', 'border-spacing', 'border-style', 'border-top',
    'border-top-color', 'border-top-left-radius', 'border-top-right-radius', 'border-top-style',
    'border-top-width', 'border-width', 'bottom', 'box-shadow', 'box-sizing', 'caret-color', 'clear',
    'clip', 'clip-path', 'color', 'column-count', 'column-gap', 'columns', 'content', 'counter-increment',
    'counter-reset', 'cursor', 'direction', 'display', 'filter', 'flex', 'flex-basis',
    'flex-direction', 'flex-flow', 'flex-grow', 'flex-shrink', 'flex-wrap', 'float', 'font', 'font-family',
    'font-size', 'font-style', 'font-variant', 'font-weight', 'gap', 'grid', 'grid-area',
    'grid-auto-columns', 'grid-auto-flow', 'grid-auto-rows', 'grid-column', 'grid-row',
    'grid-template', 'grid-template-areas', 'grid-template-columns', 'grid-template-rows',
    'height', 'justify-content', 'justify-items', 'left', 'letter-spacing', 'line-height',
    'list-style', 'list-style-image', 'list-style-position', 'list-style-type',
    'margin', 'margin-bottom', 'margin-left', 'margin-right', 'margin-top',
    'max-height', 'max-width', 'min-height', 'min-width', 'mix-blend-mode', 'object-fit', 'object-position',
    'opacity', 'order', 'outline', 'outline-color', 'outline-offset', 'outline-style',
    'outline-width', 'overflow', 'overflow-wrap', 'overflow-x', 'overflow-y', 'padding', 'padding-bottom',
    'padding-left', 'padding-right', 'padding-top', 'perspective', 'pointer-events', 'position',
    'quotes', 'resize', 'right', 'row-gap', 'scroll-behavior', 'tab-size', 'table-layout',
    'text-align', 'text-decoration', 'text-decoration-color', 'text-decoration-line',
    'text-indent', 'text-overflow', 'text-shadow', 'text-transform', 'top', 'transform',
    'transform-origin', 'transition', 'transition-delay', 'transition-duration', 'transition-property',
    'transition-timing-function', 'user-select', 'vertical-align', 'visibility', 'white-space',
    'width', 'will-change', 'word-break', 'word-spacing', 'word-wrap', 'z-index',
)
