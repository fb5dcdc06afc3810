'''
Copyright 2025 Advanced Micro Devices, Inc.
All rights reserved. This notice is intended as a precaution against inadvertent publication and does not imply publication or any waiver of confidentiality.
The year included in the foregoing notice is the year of creation of the work.
All code contained here is Property of Advanced Micro Devices, Inc.
'''

import logging

# Shared package logger, picked up by pytest --log-file / --log-level
log = logging.getLogger("dtvs")

# Failure messages collected by fail_test() for the test case currently running
error_list = []
