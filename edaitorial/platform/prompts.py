"""
Default prompt templates for the checking backend.

Placeholders are substituted literally (`{title}`, `{body}`, `{url}`,
`{word_count}`, `{available_nodes}`); braces in the JSON examples are left
untouched.
"""

BATCH_ANALYSIS_PROMPT = """Analyze the following content for SEO, accessibility, spelling and link issues and return a JSON array of issues found.

Title: {title}
URL: {url}
Word count: {word_count}
Content: {body}
Available internal nodes: {available_nodes}

Check for:
1. Title length (optimal: 30-60 characters)
2. Content length (minimum 300 words)
3. Multiple H1 tags and missing heading structure
4. Images without alt text and poor link text ("click here", "read more")
5. Spelling errors, typos and repeated words in title and body
6. Empty links (href="" or href="#") and links to /node/X that are not in the available nodes
7. Content structure, lists and visual content for long articles

Return ONLY a JSON array with this format:
[
  {
    "description": "Issue description",
    "type": "SEO|Accessibility|Typos|Links|Content",
    "severity": "Critical|High|Medium|Low",
    "impact": "High|Medium|Low"
  }
]

If no issues, return empty array: []"""


SEO_PROMPT = """Analyze the following content for SEO issues and return a JSON array of issues found.

Title: {title}
URL: {url}
Content: {body}

Check for:
1. Title length (optimal: 30-60 characters)
2. Duplicate titles across the site
3. Meta description presence and length
4. Content length (minimum 300 words)
5. Multiple H1 tags (should have only one)
6. Text-to-HTML ratio
7. Keywords from title present in content
8. URL structure

Return ONLY a JSON array with this format:
[
  {
    "description": "Issue description",
    "type": "SEO",
    "severity": "High|Medium|Low",
    "impact": "High|Medium|Low"
  }
]

If no issues, return empty array: []"""


BROKEN_LINKS_PROMPT = """Analyze the following HTML content for broken or problematic links and return a JSON array of issues.

Content: {body}
Available internal nodes: {available_nodes}

Check for:
1. Empty links (href="" or href="#")
2. Broken internal links (links to /node/X that don't exist)
3. Poor anchor text ("click here", "read more", "here", etc.)
4. External links without rel="noopener" or rel="noreferrer"
5. Links with empty or missing text

Return ONLY a JSON array with this format:
[
  {
    "description": "Issue description with count",
    "type": "Links|Accessibility",
    "severity": "High|Medium|Low",
    "impact": "High|Medium|Low"
  }
]

If no issues, return empty array: []"""


ACCESSIBILITY_PROMPT = """Analyze the following HTML content for WCAG accessibility issues and return a JSON array of issues.

Title: {title}
Content: {body}

Check for:
1. Images without alt text
2. Missing or skipped heading levels
3. Form inputs without labels
4. Non-descriptive link text ("click here", "here", "read more")
5. Very long paragraphs that hurt readability

Return ONLY a JSON array with this format:
[
  {
    "description": "Issue description",
    "type": "Accessibility",
    "severity": "Critical|High|Medium|Low",
    "impact": "High|Medium|Low"
  }
]

If no issues, return empty array: []"""


TYPOS_PROMPT = """Analyze the following content for spelling errors, typos, and repeated words.

Title: {title}
Content: {body}

Check for:
1. Common typos (teh->the, recieve->receive, definately->definitely, etc.)
2. Repeated words (e.g., "the the", "and and")
3. Spelling errors in title
4. Spelling errors in body content

Return ONLY a JSON array with this format:
[
  {
    "description": "Typo description (e.g., 'Possible typos in title: Teh -> the')",
    "type": "Typos",
    "severity": "High|Medium|Low",
    "impact": "Medium|Low"
  }
]

Severity guide:
- High: > 10 typos
- Medium: 5-10 typos or typos in title
- Low: 1-4 typos

If no issues, return empty array: []"""


SUGGESTIONS_PROMPT = """Analyze the following content and provide improvement suggestions.

Title: {title}
Content: {body}
Word count: {word_count}

Provide suggestions for:
1. Content structure (headings for long content > 300 words)
2. Use of lists for better organization
3. Adding images or visual content
4. Sentence length and readability
5. Paragraph structure
6. Active vs passive voice
7. Call-to-action presence
8. Power words and numbers in title

Return ONLY a JSON array with this format:
[
  {
    "description": "Suggestion: [specific actionable advice]",
    "type": "Content",
    "severity": "Low",
    "impact": "Low"
  }
]

Focus on actionable, specific suggestions. If content is good, return empty array: []"""
