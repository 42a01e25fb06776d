"""Find template fields, wiki links and comments in a single pass.

Each matcher gets its own handler; the handler also receives the span so
the caller can rewrite the source afterwards.
"""

from entre import Identifier, Matcher, Span, Terminator, scan

source = """Title: Release notes
Hello {{ user }}, see [[Changelog]] and [[Upgrade guide]].
<!-- internal: remove before publishing -->
"""

fields: list[str] = []
links: list[str] = []
comments: list[Span] = []

scan(
    source,
    [
        Matcher.pair("{{", "}}", lambda content, span: fields.append(content.strip())),
        Matcher.pair("[[", "]]", lambda content, span: links.append(content)),
        Matcher.pair("<!--", "-->", lambda content, span: comments.append(span)),
        # Only the first line, anchored at the start of the text
        Matcher.pair(
            Identifier.prefix("Title: "),
            "\n",
            lambda content, span: print(f"title: {content}"),
            allow_multiple_matches=False,
        ),
        # Everything after the last comment marker up to the end
        Matcher.pair("-->", Terminator.end(), lambda content, span: print(f"tail: {content!r}")),
    ],
)

print(f"fields: {fields}")
print(f"links: {links}")
for span in comments:
    print(f"comment at {span.start}-{span.end}: {source[span.as_slice()]!r}")
