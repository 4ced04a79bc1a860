"""Example components built on ComponentResult: an editor, a pager and a page that embeds both."""
