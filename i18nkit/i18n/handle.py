"""Translation handle returned by a translator resolver.

A T captures a resolved Value plus the plural bucket and data to render it
with. Every chained call returns a new handle, so an intermediate handle can
be reused for several renders without interference.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

from i18nkit.i18n.models import Errlog, Plurality, Value
from i18nkit.i18n.template import Scope, render_translation

COUNT_FIELD = "Count"


@dataclass(frozen=True)
class T:
    """A single translation ready to be rendered.

    Usage:
        tr = translator.tfunc("en-us")
        tr("apple.count").plural(3, 10).render()        # "3 apples"
        str(tr("apple.count").with_data({"Name": "x"}).other())

    Attributes:
        value: Resolved translated value.
        plurality: Bucket selected for rendering.
        count: Count exposed to the few bucket as ``Count``.
        data: Optional data object merged into the text.
        log: Diagnostic sink inherited from the translator.
    """

    value: Value
    plurality: Plurality = Plurality.ONE
    count: int = 0
    data: Any = None
    log: Optional[Errlog] = None

    def with_data(self, data: Any) -> "T":
        """Attach a data object to merge into the translated text.

        Replaces any previously attached data.
        """
        return replace(self, data=data)

    def zero(self) -> "T":
        """Select the zero bucket."""
        return replace(self, plurality=Plurality.ZERO, count=0)

    def other(self) -> "T":
        """Select the other bucket. The count is left untouched."""
        return replace(self, plurality=Plurality.OTHER)

    def plural(self, count: int, many: int) -> "T":
        """Select a bucket from a count.

        Policy:
            n <= 0        -> zero, count 0 (negative counts are reported)
            1             -> one, count 1
            1 < n < many  -> few, count n
            n >= many     -> many, count unchanged from this handle

        Args:
            count: Number of items.
            many: Threshold from which the many bucket is used.

        Returns:
            New handle with the selected bucket.
        """
        if count < 0 and self.log is not None:
            self.log("Negative plural count: %s, using zero", count)
        if count <= 0:
            return replace(self, plurality=Plurality.ZERO, count=0)
        if count == 1:
            return replace(self, plurality=Plurality.ONE, count=1)
        if count < many:
            return replace(self, plurality=Plurality.FEW, count=count)
        # The many bucket keeps whatever count the handle already carried.
        return replace(self, plurality=Plurality.MANY)

    def render(self) -> str:
        """Render the selected bucket, merging data when attached.

        The few bucket is always rendered as a template with ``Count``
        available; attached data is reachable in the same pass. Other buckets
        are rendered as templates only when data is attached. Rendering
        problems go to the diagnostic sink and never raise.

        Returns:
            Final translated text.
        """
        plurality = self.plurality
        if not isinstance(plurality, Plurality):
            plurality = Plurality.ONE

        text = self.value.get(plurality)

        if plurality is Plurality.FEW:
            scope = Scope({COUNT_FIELD: self.count}, self.data)
            return render_translation(text, scope, self.log)

        if self.data is not None:
            return render_translation(text, self.data, self.log)
        return text

    def __str__(self) -> str:
        return self.render()
