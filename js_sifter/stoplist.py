# File: js_sifter/stoplist.py
"""Built-in set of low-signal strings dropped in coarse extraction mode.

Keywords, global object names, DOM and event vocabulary and the `typeof`
results that show up in nearly every bundle and say nothing about the site.
"""

from __future__ import annotations

from typing import FrozenSet

COMMON_STRINGS: FrozenSet[str] = frozenset(
    """
    undefined null true false NaN Infinity
    arguments async await break case catch class const constructor continue
    debugger default delete do else enum export extends finally for from
    function get if implements import in instanceof interface let new of
    package private protected public return set static super switch this
    throw try typeof var void while with yield
    object string number boolean symbol bigint
    Object Array String Number Boolean Symbol BigInt Function Date RegExp
    Error TypeError RangeError SyntaxError ReferenceError Promise Map Set
    WeakMap WeakSet Proxy Reflect JSON Math Intl
    prototype __proto__ length name value call apply bind toString valueOf
    hasOwnProperty isPrototypeOf propertyIsEnumerable defineProperty
    getOwnPropertyNames getOwnPropertyDescriptor getPrototypeOf setPrototypeOf
    keys values entries assign create freeze iterator next done return
    push pop shift unshift slice splice concat join split indexOf
    lastIndexOf includes forEach map filter reduce some every find
    findIndex sort reverse replace match test exec trim substring substr
    charAt charCodeAt fromCharCode toLowerCase toUpperCase startsWith
    endsWith parse stringify then resolve reject all race finally
    window document navigator location history console self globalThis
    module exports require define amd
    log warn error info debug
    div span a p img input button form script style link meta head body
    html id class type src href rel width height
    click change input submit load error focus blur keydown keyup
    mousedown mouseup mousemove resize scroll
    addEventListener removeEventListener preventDefault stopPropagation
    getElementById querySelector querySelectorAll createElement
    appendChild removeChild setAttribute getAttribute innerHTML
    textContent className classList parentNode children
    setTimeout clearTimeout setInterval clearInterval requestAnimationFrame
    GET POST PUT DELETE PATCH
    a b c d e f g h i j k l m n o p q r s t u v w x y z
    """.split()
) | frozenset({"use strict"})

__all__ = ["COMMON_STRINGS"]
