from asset_build.compression.models import AssetKind, CompressionOptions


class ArgumentBuilder:
    """Translates CompressionOptions into the compressor's argument list.

    Option combinations are not validated; the compressor reports invalid
    ones on its diagnostic stream.
    """

    def build(
        self,
        options: CompressionOptions,
        output_path: str,
        input_path: str,
    ) -> list[str]:
        args = ["--type", options.kind.extension]

        if options.kind is AssetKind.SCRIPT:
            args.extend(self._script_flags(options))

        if options.line_break is not None and options.line_break > 0:
            args.extend(["--line-break", str(options.line_break)])

        if options.charset:
            args.extend(["--charset", options.charset])

        if options.verbose:
            args.append("--verbose")

        # Each path is a single argv element, so whitespace needs no quoting.
        args.extend(["-o", output_path, input_path])
        return args

    def _script_flags(self, options: CompressionOptions) -> list[str]:
        flags: list[str] = []
        if options.minify_only:
            flags.append("--nomunge")
        if options.preserve_semicolons:
            flags.append("--preserve-semi")
        if options.disable_optimizations:
            flags.append("--disable-optimizations")
        return flags
