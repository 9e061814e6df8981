#!/usr/bin/env python3

from cdix.kernel.preset import shell

CDIX_SIGNATURE = b'CdIx'

cdix = shell(align=2, signature=CDIX_SIGNATURE)
