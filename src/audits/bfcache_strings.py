from __future__ import annotations

NOT_RESTORED_REASON_DESCRIPTIONS: dict[str, str] = {
    "NotPrimaryMainFrame": "Navigation happened in a frame other than the main frame.",
    "BackForwardCacheDisabled": (
        "Back/forward cache is disabled by flags. Visit chrome://flags/#back-forward-cache "
        "to enable it locally on this device."
    ),
    "RelatedActiveContentsExist": (
        "The page was opened using `window.open()` and another tab has a reference to it, "
        "or the page opened a window."
    ),
    "HTTPStatusNotOK": "Only pages with a status code of 2XX can be cached.",
    "SchemeNotHTTPOrHTTPS": "Only pages whose URL scheme is HTTP / HTTPS can be cached.",
    "Loading": "The page did not finish loading before navigating away.",
    "WasGrantedMediaAccess": (
        "Pages that have granted access to record video or audio are not currently "
        "eligible for back/forward cache."
    ),
    "HTTPMethodNotGET": "Only pages loaded via a GET request are eligible for back/forward cache.",
    "SubframeIsNavigating": "An iframe on the page started a navigation that did not complete.",
    "Timeout": "The page exceeded the maximum time in back/forward cache and was expired.",
    "CacheLimit": "The page was evicted from the cache to allow another page to be cached.",
    "JavaScriptExecution": "Chrome detected an attempt to execute JavaScript while in the cache.",
    "RendererProcessKilled": "Renderer process for the page in back/forward cache was killed.",
    "RendererProcessCrashed": "Renderer process for the page in back/forward cache crashed.",
    "SchedulerTrackedFeatureUsed": "The page uses a feature that prevents caching.",
    "ConflictingBrowsingInstance": "The page and the navigation belong to conflicting browsing instances.",
    "CacheFlushed": "The cache was intentionally cleared.",
    "ServiceWorkerVersionActivation": (
        "The page was evicted from back/forward cache due to a service worker activation."
    ),
    "SessionRestored": "Chrome restarted and cleared the back/forward cache entries.",
    "ServiceWorkerPostMessage": (
        "A service worker attempted to send the page in back/forward cache a `MessageEvent`."
    ),
    "EnteredBackForwardCacheBeforeServiceWorkerHostAdded": (
        "A service worker was activated while the page was in back/forward cache."
    ),
    "ServiceWorkerClaim": "The page was claimed by a service worker while it is in back/forward cache.",
    "ServiceWorkerUnregistration": (
        "A service worker was unregistered while a page was in back/forward cache."
    ),
    "TimeoutPuttingInCache": (
        "The page timed out entering back/forward cache (likely due to long-running "
        "pagehide handlers)."
    ),
    "BackForwardCacheDisabledByLowMemory": "Back/forward cache is disabled due to insufficient memory.",
    "BackForwardCacheDisabledByCommandLine": "Back/forward cache is disabled by the command line.",
    "BackForwardCacheDisabledForDelegate": "Back/forward cache is not supported by delegate.",
    "BackForwardCacheDisabledForPrerender": "Back/forward cache is disabled for prerenderer.",
    "NetworkRequestRedirected": (
        "The page was evicted from the cache because an active network request involved "
        "a redirect."
    ),
    "NetworkRequestTimeout": (
        "The page was evicted from the cache because a network connection was open too "
        "long. Chrome limits the amount of time that a page may receive data while cached."
    ),
    "NetworkExceedsBufferLimit": (
        "The page was evicted from the cache because an active network connection "
        "received too much data. Chrome limits the amount of data that a page may receive "
        "while cached."
    ),
    "NavigationCancelledWhileRestoring": (
        "Navigation was cancelled before the page could be restored from back/forward cache."
    ),
    "UserAgentOverrideDiffers": "Browser has changed the user agent override header.",
    "ForegroundCacheLimit": "The page was evicted from the cache to allow another page to be cached.",
    "BrowsingInstanceNotSwapped": (
        "The browsing instance for the page (top-level browsing context) was not swapped."
    ),
    "DisableForRenderFrameHostCalled": "Back/forward cache is disabled by the embedder.",
    "DomainNotAllowed": "Back/forward cache is not allowed for this domain.",
    "ErrorDocument": "Back/forward cache is disabled due to a document error.",
    "NoResponseHead": (
        "Pages that do not have a valid response head cannot enter back/forward cache."
    ),
    "UnloadHandlerExistsInMainFrame": "The page has an unload handler in the main frame.",
    "UnloadHandlerExistsInSubFrame": "The page has an unload handler in a sub frame.",
    "CacheControlNoStore": (
        "Pages with cache-control:no-store header cannot enter back/forward cache."
    ),
    "CacheControlNoStoreCookieModified": (
        "Back/forward cache is disabled because cookies were modified on a page that "
        "uses cache-control:no-store."
    ),
    "CacheControlNoStoreHTTPOnlyCookieModified": (
        "Back/forward cache is disabled because HTTPOnly cookies were modified on a page "
        "that uses cache-control:no-store."
    ),
    "MainResourceHasCacheControlNoStore": (
        "Pages whose main resource has cache-control:no-store cannot enter back/forward cache."
    ),
    "MainResourceHasCacheControlNoCache": (
        "Pages whose main resource has cache-control:no-cache cannot enter back/forward cache."
    ),
    "SubresourceHasCacheControlNoStore": (
        "Pages whose subresource has cache-control:no-store cannot enter back/forward cache."
    ),
    "SubresourceHasCacheControlNoCache": (
        "Pages whose subresource has cache-control:no-cache cannot enter back/forward cache."
    ),
    "JsNetworkRequestReceivedCacheControlNoStoreResource": (
        "Back/forward cache is disabled because some JavaScript network request received "
        "a resource with `Cache-Control: no-store` header."
    ),
    "WebSocket": "Pages with WebSocket cannot enter back/forward cache.",
    "WebTransport": "Pages with WebTransport cannot enter back/forward cache.",
    "WebRTC": "Pages with WebRTC cannot enter back/forward cache.",
    "ContainsPlugins": "Pages containing plugins are not currently eligible for back/forward cache.",
    "DedicatedWorkerOrWorklet": (
        "Pages that use a dedicated worker or worklet are not currently eligible for "
        "back/forward cache."
    ),
    "OutstandingNetworkRequestOthers": (
        "Pages with an in-flight network request are not currently eligible for "
        "back/forward cache."
    ),
    "OutstandingNetworkRequestFetch": (
        "Pages with an in-flight fetch network request are not currently eligible for "
        "back/forward cache."
    ),
    "OutstandingNetworkRequestXHR": (
        "Pages with an in-flight XHR network request are not currently eligible for "
        "back/forward cache."
    ),
    "OutstandingNetworkRequestDirectSocket": (
        "Pages with an in-flight direct socket request are not currently eligible for "
        "back/forward cache."
    ),
    "BroadcastChannel": (
        "The page cannot be cached because it has a BroadcastChannel instance with "
        "registered listeners."
    ),
    "IndexedDBEvent": (
        "Pages with an open IndexedDB connection are not currently eligible for "
        "back/forward cache."
    ),
    "SharedWorker": "Pages that use SharedWorker are not currently eligible for back/forward cache.",
    "WebLocks": "Pages that use WebLocks are not currently eligible for back/forward cache.",
    "WebHID": "Pages that use WebHID are not currently eligible for back/forward cache.",
    "WebShare": "Pages that use WebShare are not currently eligible for back/forward cache.",
    "WebXR": "Pages that use WebXR are not currently eligible for back/forward cache.",
    "WebNfc": "Pages that use WebNfc are not currently eligible for back/forward cache.",
    "WebOTPService": "Pages that use WebOTPService are not currently eligible for back/forward cache.",
    "WebDatabase": "Pages that use WebDatabase are not currently eligible for back/forward cache.",
    "RequestedMIDIPermission": (
        "Pages that have requested MIDI permissions are not currently eligible for "
        "back/forward cache."
    ),
    "RequestedAudioCapturePermission": (
        "Pages that have requested audio capture permissions are not currently eligible "
        "for back/forward cache."
    ),
    "RequestedVideoCapturePermission": (
        "Pages that have requested video capture permissions are not currently eligible "
        "for back/forward cache."
    ),
    "RequestedBackForwardCacheBlockedSensors": (
        "Pages that have requested sensor permissions are not currently eligible for "
        "back/forward cache."
    ),
    "RequestedBackgroundWorkPermission": (
        "Pages that have requested background sync or fetch permissions are not currently "
        "eligible for back/forward cache."
    ),
    "RequestedStorageAccessGrant": (
        "Pages that have requested storage access are not currently eligible for "
        "back/forward cache."
    ),
    "PrintedPage": "Pages that show Print UI are not currently eligible for back/forward cache.",
    "SpeechRecognizer": (
        "Pages that use SpeechRecognizer are not currently eligible for back/forward cache."
    ),
    "SpeechSynthesis": (
        "Pages that use SpeechSynthesis are not currently eligible for back/forward cache."
    ),
    "KeyboardLock": "Pages that use Keyboard lock are not currently eligible for back/forward cache.",
    "PictureInPicture": (
        "Pages that use Picture-in-Picture are not currently eligible for back/forward cache."
    ),
    "AppBanner": "Pages that requested an AppBanner are not currently eligible for back/forward cache.",
    "PaymentManager": (
        "Pages that use Payment Manager are not currently eligible for back/forward cache."
    ),
    "IdleManager": "Pages that use IdleManager are not currently eligible for back/forward cache.",
    "KeepaliveRequest": "Back/forward cache is disabled due to a keepalive request.",
    "InjectedJavascript": (
        "Pages that JavaScript is injected into by extensions are not currently eligible "
        "for back/forward cache."
    ),
    "InjectedStyleSheet": (
        "Pages that a StyleSheet is injected into by extensions are not currently eligible "
        "for back/forward cache."
    ),
    "ContentFileChooser": "Pages that use a file chooser are not eligible for back/forward cache.",
    "ContentWebAuthenticationAPI": (
        "Pages that use WebAuthentication API are not eligible for back/forward cache."
    ),
    "ContentWebBluetooth": "Pages that use WebBluetooth API are not eligible for back/forward cache.",
    "ContentWebUSB": "Pages that use WebUSB API are not eligible for back/forward cache.",
    "ContentFileSystemAccess": (
        "Pages that use the File System Access API are not eligible for back/forward cache."
    ),
    "ContentMediaSessionService": (
        "Pages that use Media Session API and set a playback state are not eligible for "
        "back/forward cache."
    ),
    "EmbedderExtensions": "Back/forward cache is disabled due to extensions.",
    "ExtensionMessaging": (
        "Extensions with long-lived connections should close the connection before "
        "entering back/forward cache."
    ),
    "ActivationNavigationsDisallowedForBug1234857": (
        "Back/forward cache is disabled because of an activation navigation."
    ),
}


def describe_reason(reason: str) -> str:
    return NOT_RESTORED_REASON_DESCRIPTIONS.get(reason, reason)
