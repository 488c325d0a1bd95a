"""Browser-side JavaScript predicates and actions.

Each snippet takes the button selector as its single argument (where it
needs one) and is passed to ``page.wait_for_function`` or ``page.evaluate``.
"""

# True once the element is rendered, enabled, styled visible, has a
# non-empty box, and can receive pointer events.
JS_IS_CLICKABLE = """(selector) => {
    const element = document.querySelector(selector);
    if (!element) return false;

    const rect = element.getBoundingClientRect();
    const style = window.getComputedStyle(element);

    return (
        element.offsetParent !== null &&
        !element.disabled &&
        style.visibility !== 'hidden' &&
        style.display !== 'none' &&
        rect.width > 0 && rect.height > 0 &&
        style.pointerEvents !== 'none'
    );
}"""

JS_IS_ENABLED = """(selector) => {
    const btn = document.querySelector(selector);
    return !!btn && !btn.disabled && btn.offsetParent !== null;
}"""

JS_NO_LOADING_INDICATORS = """(selector) => {
    return document.querySelectorAll(selector).length === 0;
}"""

JS_SCROLL_INTO_VIEW_SMOOTH = """(selector) => {
    const element = document.querySelector(selector);
    if (element) {
        element.scrollIntoView({ behavior: 'smooth', block: 'center', inline: 'center' });
    }
}"""

JS_SCROLL_INTO_VIEW = """(selector) => {
    const element = document.querySelector(selector);
    if (element) {
        element.scrollIntoView({ block: 'center', inline: 'center' });
    }
}"""

# Returns false when the element is gone so the caller can treat it as a
# failed attempt.
JS_DOM_CLICK = """(selector) => {
    const element = document.querySelector(selector);
    if (!element) return false;
    element.click();
    return true;
}"""
