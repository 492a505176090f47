"""
# gobfile: GOB container archives.

A GOB archive packs multiple named binary blobs into a single file together
with a directory describing where each of them is and how big it is.

The layout of the format is described declaratively by chunks made of fields
(see gobfile.core and gobfile.fields) and two main operations are defined
on an archive:

 1. read(): parse a buffer into an ordered list of entries that refer to
    the buffer itself (archive-backed entries).

 2. write(): encode an ordered list of entries into a new buffer, recomputing
    the position of each content and of the directory.

Between the two the entries can be imported (fresh entries, owning their
content), exported, looked up and removed; gobfile.archive.file.GOBFile
keeps together the buffer and the entries referring to it.
"""
