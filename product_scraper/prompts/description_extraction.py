"""
Prompt templates for product description extraction.
"""

# System prompt shared by every completion provider
DESCRIPTION_SYSTEM_PROMPT = (
    "You are a web scraping assistant. Extract the main product description "
    "from the HTML content of an eBay product page. Return ONLY the description "
    "text, nothing else."
)

# User prompt, formatted with the (truncated) page HTML
DESCRIPTION_USER_PROMPT = (
    "Extract the product description from this eBay product page HTML: {html}"
)
