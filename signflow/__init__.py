"""Template based document signing service.

Templates carry ``{field}`` placeholders; documents are value-filled copies
sent to a recipient and signed with a handwritten signature.
"""
