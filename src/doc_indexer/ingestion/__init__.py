"""
Ingestion — chunking, embedding and binarization of document text.

These are the leaf building blocks the indexing pipeline strings together
for every chunk of a document.
"""
