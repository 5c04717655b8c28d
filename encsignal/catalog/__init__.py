from .meta import FileRecord, FileReferenceSet
from .encode import EncodeCatalog
