"""Brigade Pay package.

Record keeping and compensation (ekwiwalent) calculation for a volunteer fire
brigade. Organized by feature modules (members, operations, reports, ...) with
a thin Flask controller layer on top of service/repository layers.
"""
